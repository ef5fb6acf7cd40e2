#!/usr/bin/env python3
# src/skl2dx/presentation/cli/make_dx.py

"""
Command-line interface converting a skeleton file into OpenDX documents.

Writes a lattice box document and an atom geometry document, with atom
colors and sizes taken from the element table.
"""

import argparse
import logging
import sys
from typing import List, Optional

from ...core.domain.models.conversion_config import (
    DEFAULT_ATOM_FILE,
    DEFAULT_INPUT_FILE,
    DEFAULT_LATTICE_FILE,
    ConversionConfig,
)
from ...core.exceptions import Skl2DXError
from ...core.services.conversion_service import ConversionService
from ...infrastructure.elements.element_database import ElementDatabase
from ...infrastructure.history.command_history import record_command
from ...infrastructure.readers.skeleton_reader import SkeletonReader


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Set up logging configuration."""
    logger = logging.getLogger("skl2dx")
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(message)s"
            if not verbose
            else "%(asctime)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Convert an OLCAO skeleton file into OpenDX lattice and atom documents."
    )
    parser.add_argument(
        "-i",
        "--input",
        default=DEFAULT_INPUT_FILE,
        help=f"Skeleton file to read (default: {DEFAULT_INPUT_FILE})",
    )
    parser.add_argument(
        "-s",
        "--scale",
        type=float,
        default=1.0,
        help="Factor applied to every covalent radius (default: 1.0)",
    )
    parser.add_argument(
        "-e",
        "--element",
        action="append",
        default=[],
        dest="elements",
        metavar="NAME",
        help="Only include atoms of this element; repeat for more (default: all)",
    )
    parser.add_argument(
        "-g",
        "--grey",
        action="store_true",
        help="Use greyscale values instead of full color",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        default=".",
        help="Directory for the output documents (default: current directory)",
    )
    parser.add_argument(
        "--lattice-file",
        default=DEFAULT_LATTICE_FILE,
        help=f"Name of the lattice document (default: {DEFAULT_LATTICE_FILE})",
    )
    parser.add_argument(
        "--atom-file",
        default=DEFAULT_ATOM_FILE,
        help=f"Name of the atom document (default: {DEFAULT_ATOM_FILE})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show detailed output",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the skeleton to OpenDX conversion."""
    argv = list(sys.argv if argv is None else argv)
    parser = setup_parser()
    args = parser.parse_args(argv[1:])

    try:
        config = ConversionConfig(
            input_path=args.input,
            scale_factor=args.scale,
            elements=args.elements,
            greyscale=args.grey,
            output_dir=args.output_dir,
            lattice_file=args.lattice_file,
            atom_file=args.atom_file,
        )
    except ValueError as e:
        parser.error(str(e))

    logger = setup_logging(args.verbose)

    try:
        record_command(argv)
        service = ConversionService(ElementDatabase(), SkeletonReader(), config)
        result = service.run()
    except (Skl2DXError, OSError) as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    logger.info(
        f"Converted {result.num_selected} of {result.num_atoms} atoms from {config.input_path}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
