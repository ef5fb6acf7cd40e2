"""Core domain models, interfaces and services for skeleton to OpenDX conversion."""

from .domain.models.atom import Atom
from .domain.models.lattice import Lattice
from .domain.models.structure_model import StructureModel
from .domain.models.selection import SelectionCriteria, InclusionMask
from .domain.models.conversion_config import ConversionConfig
from .domain.interfaces.element_provider import ElementAttributeProvider
from .services.atom_selector import select_atoms
from .services.geometry_writer import GeometryWriter
from .services.conversion_service import ConversionService, ConversionResult

__all__ = [
    "Atom",
    "Lattice",
    "StructureModel",
    "SelectionCriteria",
    "InclusionMask",
    "ConversionConfig",
    "ElementAttributeProvider",
    "select_atoms",
    "GeometryWriter",
    "ConversionService",
    "ConversionResult",
]
