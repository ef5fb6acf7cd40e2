"""Interface for structure file readers."""

from abc import ABC, abstractmethod

from ..models.structure_model import StructureModel
from .element_provider import ElementAttributeProvider


class StructureReader(ABC):
    """Abstract base class for readers producing a StructureModel."""

    @abstractmethod
    def read(self, filepath: str, elements: ElementAttributeProvider) -> StructureModel:
        """
        Read a structure file.

        Args:
            filepath: Path to the structure file
            elements: Provider used to resolve element names to atomic numbers

        Returns:
            StructureModel holding the lattice and atoms of the file
        """
        pass
