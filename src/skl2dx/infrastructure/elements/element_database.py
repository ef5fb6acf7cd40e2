#!/usr/bin/env python3
# src/skl2dx/infrastructure/elements/element_database.py

"""
Element attribute table backed by RDKit's periodic table.

Covalent radii and element symbols come from RDKit. Display colors are
scalar values in [0, 1] derived from the Jmol palette so OpenDX can map
them through a colormap. The full color is the element's position in the
palette ordered by hue, with near-grey entries in a band of their own at the
top ordered by brightness. Every element gets its own value and similar
colors stay close on the colormap. The greyscale value is the luma of the
Jmol color.
"""

import colorsys
import logging
from dataclasses import dataclass
from typing import Dict, Tuple

import numpy as np
from rdkit import Chem

from ...core.domain.interfaces.element_provider import ElementAttributeProvider
from ...core.exceptions import UnknownElementError
from .jmol_colors import JMOL_COLORS, MAX_ATOMIC_NUMBER

logger = logging.getLogger(__name__)

# Saturation below which a palette entry counts as grey
ACHROMATIC_SATURATION = 0.15


@dataclass(frozen=True)
class ElementAttributes:
    """Display attributes of a single element."""

    atomic_number: int
    symbol: str
    color: float
    grey_color: float
    covalent_radius: float


def _hex_to_rgb(hex_color: str) -> Tuple[float, float, float]:
    hex_color = hex_color.lstrip("#")
    return tuple(int(hex_color[i : i + 2], 16) / 255.0 for i in (0, 2, 4))


def luma(hex_color: str) -> float:
    """ITU-R 601 luma of a hex RGB color, in [0, 1]."""
    red, green, blue = _hex_to_rgb(hex_color)
    return round(0.299 * red + 0.587 * green + 0.114 * blue, 6)


def color_scale(palette: Dict[int, str]) -> Dict[int, float]:
    """
    Assign each element of a palette a distinct scalar in [0, 1].

    Chromatic colors are ordered by hue, then saturation and value. Grey
    colors follow them, ordered by value. The scalar is the element's rank
    in that order divided by the last rank.

    Args:
        palette: Hex RGB colors keyed by atomic number

    Returns:
        Color scalar keyed by atomic number
    """

    def sort_key(z):
        hue, saturation, value = colorsys.rgb_to_hsv(*_hex_to_rgb(palette[z]))
        if saturation < ACHROMATIC_SATURATION:
            return (1, value, saturation, hue, z)
        return (0, hue, saturation, value, z)

    ordered = sorted(palette, key=sort_key)
    last = max(len(ordered) - 1, 1)
    return {z: round(rank / last, 6) for rank, z in enumerate(ordered)}


class ElementDatabase(ElementAttributeProvider):
    """Per-element colors and covalent radii for atomic numbers 1 to 103."""

    def __init__(self, max_atomic_number: int = MAX_ATOMIC_NUMBER):
        periodic_table = Chem.GetPeriodicTable()
        palette = {z: JMOL_COLORS[z] for z in range(1, max_atomic_number + 1)}
        colors = color_scale(palette)

        self._attributes: Dict[int, ElementAttributes] = {}
        self._symbols: Dict[str, int] = {}
        # Index 0 is unused so the array can be indexed by atomic number
        self._radii = np.zeros(max_atomic_number + 1, dtype=float)

        for z in range(1, max_atomic_number + 1):
            symbol = periodic_table.GetElementSymbol(z)
            radius = float(periodic_table.GetRcovalent(z))
            self._attributes[z] = ElementAttributes(
                atomic_number=z,
                symbol=symbol,
                color=colors[z],
                grey_color=luma(palette[z]),
                covalent_radius=radius,
            )
            self._symbols[symbol.lower()] = z
            self._radii[z] = radius

        self._scale = 1.0
        logger.debug(f"Loaded element table with {len(self._attributes)} elements")

    def __len__(self) -> int:
        return len(self._attributes)

    def __contains__(self, atomic_number) -> bool:
        return atomic_number in self._attributes

    @property
    def scale(self) -> float:
        """Product of every factor applied so far."""
        return self._scale

    def attributes(self, atomic_number: int) -> ElementAttributes:
        try:
            return self._attributes[atomic_number]
        except KeyError:
            raise UnknownElementError(atomic_number) from None

    def atomic_number(self, element: str) -> int:
        try:
            return self._symbols[element.strip().lower()]
        except KeyError:
            raise UnknownElementError(element) from None

    def color(self, atomic_number: int) -> float:
        return self.attributes(atomic_number).color

    def grey_color(self, atomic_number: int) -> float:
        return self.attributes(atomic_number).grey_color

    def base_radius(self, atomic_number: int) -> float:
        return self.attributes(atomic_number).covalent_radius

    def scaled_radius(self, atomic_number: int) -> float:
        self.attributes(atomic_number)
        return float(self._radii[atomic_number])

    def apply_scale(self, factor: float) -> None:
        """
        Multiply every covalent radius by ``factor`` in place.

        Repeated calls compound: applying 2.0 twice leaves radii at 4x.
        """
        self._radii *= factor
        self._scale *= factor
        logger.debug(f"Covalent radius scale is now {self._scale}")
