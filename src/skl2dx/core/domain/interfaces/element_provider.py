"""Interface for per-element display attributes."""

from abc import ABC, abstractmethod


class ElementAttributeProvider(ABC):
    """
    Source of per-element colors and covalent radii, keyed by atomic number.

    Radii are scaled in place by ``apply_scale``. Every call multiplies the
    current radii again, so a run must apply its scale factor exactly once.
    """

    @abstractmethod
    def atomic_number(self, element: str) -> int:
        """Resolve a case-insensitive element symbol to its atomic number."""
        pass

    @abstractmethod
    def color(self, atomic_number: int) -> float:
        """Full-color value for an element."""
        pass

    @abstractmethod
    def grey_color(self, atomic_number: int) -> float:
        """Greyscale value for an element."""
        pass

    @abstractmethod
    def base_radius(self, atomic_number: int) -> float:
        """Unscaled covalent radius in Angstrom."""
        pass

    @abstractmethod
    def scaled_radius(self, atomic_number: int) -> float:
        """Covalent radius after every ``apply_scale`` call so far."""
        pass

    @abstractmethod
    def apply_scale(self, factor: float) -> None:
        """Multiply every stored covalent radius by ``factor``."""
        pass
