"""Interfaces for the collaborators the conversion depends on."""

from .element_provider import ElementAttributeProvider
from .structure_reader import StructureReader

__all__ = ["ElementAttributeProvider", "StructureReader"]
