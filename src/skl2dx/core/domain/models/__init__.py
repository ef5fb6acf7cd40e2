"""Domain model classes."""

from .atom import Atom
from .lattice import Lattice
from .structure_model import StructureModel
from .selection import SelectionCriteria, InclusionMask
from .conversion_config import ConversionConfig

__all__ = [
    "Atom",
    "Lattice",
    "StructureModel",
    "SelectionCriteria",
    "InclusionMask",
    "ConversionConfig",
]
