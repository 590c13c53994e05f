#!/usr/bin/env python3
"""
Validate an XML Transformation

Applies a transform specification to a source document with the
configured engine and reports whether it applied cleanly.

Usage:
    python validate_transform.py <source> <transform> [--engine module:Name] [--config file]

Examples:
    # Engine named on the command line
    python validate_transform.py web.config web.Release.config --engine mypkg.engine:XdtEngine

    # Engine and options from a config file
    python validate_transform.py web.config web.Release.config --config validator.yaml

    # Report warnings separately instead of failing on them
    python validate_transform.py web.config web.Release.config --allow-warnings

Exit codes:
    0  transformation applied cleanly
    1  transformation logged errors
    2  the run could not be performed (bad arguments, missing files, no engine)
"""

import argparse
import logging
import sys
from pathlib import Path

from xdt_core.config.settings import get_default_config, load_config
from xdt_core.validation.transform_validator import TransformValidator


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Validate an XML transformation against a source document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s web.config web.Release.config --engine mypkg.engine:XdtEngine
  %(prog)s web.config web.Release.config --config validator.yaml --verbose
        """
    )

    parser.add_argument(
        "source",
        type=Path,
        help="Path to the source XML document"
    )

    parser.add_argument(
        "transform",
        type=Path,
        help="Path to the transform specification"
    )

    parser.add_argument(
        "-e", "--engine",
        default=None,
        help="Engine import path, e.g. 'mypkg.engine:XdtEngine' (overrides config)"
    )

    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to a JSON or YAML validator config"
    )

    parser.add_argument(
        "--allow-warnings",
        action="store_true",
        help="Log warnings separately instead of treating them as errors"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print the full verbose log"
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else get_default_config()
        if args.engine:
            config.engine.engine = args.engine
        if args.allow_warnings:
            config.treat_warnings_as_errors = False

        logging.basicConfig(
            level=getattr(logging, config.log_level.upper(), logging.INFO),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

        validator = TransformValidator(config=config)
        validator.validate(args.source, args.transform)
    except Exception as e:
        print(f"\n✗ Error: {e}", file=sys.stderr)
        return 2

    result = validator.last_result
    if args.verbose:
        print(result.verbose_log, end="")
    print(result.summary())

    return 0 if result.passed else 1


if __name__ == "__main__":
    sys.exit(main())
