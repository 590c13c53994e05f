"""
XML Processing Utilities
========================

Document and transform loading used by the validator.
"""

from xdt_core.xml.utils import (
    file_basename,
    load_document,
    read_transform_text,
)

__all__ = [
    "file_basename",
    "load_document",
    "read_transform_text",
]
