"""Core conversion services."""

from .atom_selector import select_atoms
from .geometry_writer import GeometryWriter, format_atom_document, format_lattice_document
from .conversion_service import ConversionService, ConversionResult

__all__ = [
    "select_atoms",
    "GeometryWriter",
    "format_atom_document",
    "format_lattice_document",
    "ConversionService",
    "ConversionResult",
]
