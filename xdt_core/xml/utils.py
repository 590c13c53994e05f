"""
XML Utility Functions
=====================

Loading helpers for the documents and transform specifications a
transformation run consumes.
"""

from pathlib import Path
from typing import Optional, Union
import logging
import ntpath

from lxml import etree

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def file_basename(file: Optional[PathLike]) -> str:
    """
    Strip a path to its final segment.

    Both '/' and '\\' are treated as separators so locations reported
    by engines on any platform render the same way.

    Example:
        >>> file_basename("C:\\\\configs\\\\web.config")
        'web.config'
        >>> file_basename(None)
        ''
    """
    if not file:
        return ""
    return ntpath.basename(str(file))


def load_document(path: PathLike, preserve_whitespace: bool = True) -> 'etree._ElementTree':
    """
    Parse an XML document from disk.

    Args:
        path: Path to the XML file
        preserve_whitespace: Keep whitespace-only text nodes intact

    Returns:
        Parsed lxml ElementTree

    Raises:
        FileNotFoundError: If the file doesn't exist
        etree.XMLSyntaxError: If the file is not well-formed
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Source document not found: {path}")

    parser = etree.XMLParser(
        remove_blank_text=not preserve_whitespace,
        strip_cdata=False,
        resolve_entities=False,
    )
    logger.debug(f"Loading document: {path}")
    return etree.parse(str(path), parser)


def read_transform_text(path: PathLike) -> str:
    """
    Read a transform specification as raw text.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Transformation file not found: {path}")
    return path.read_text(encoding='utf-8')
