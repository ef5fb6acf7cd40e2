"""Shared fixtures for the skl2dx test suite."""

import numpy as np
import pytest

from skl2dx.core.domain.interfaces.element_provider import ElementAttributeProvider
from skl2dx.core.domain.models.atom import Atom
from skl2dx.core.domain.models.lattice import Lattice
from skl2dx.core.domain.models.structure_model import StructureModel
from skl2dx.core.exceptions import UnknownElementError


class FakeElementProvider(ElementAttributeProvider):
    """Small element table with easy to recognise values."""

    SYMBOLS = {"h": 1, "c": 6, "o": 8, "al": 13, "si": 14, "ge": 32}
    RADII = {1: 0.3, 6: 0.75, 8: 0.7, 13: 1.2, 14: 1.1, 32: 1.2}

    def __init__(self):
        self.radii = dict(self.RADII)

    def _check(self, atomic_number):
        if atomic_number not in self.RADII:
            raise UnknownElementError(atomic_number)

    def atomic_number(self, element):
        try:
            return self.SYMBOLS[element.lower()]
        except KeyError:
            raise UnknownElementError(element) from None

    def color(self, atomic_number):
        self._check(atomic_number)
        return atomic_number / 100

    def grey_color(self, atomic_number):
        self._check(atomic_number)
        return atomic_number / 1000

    def base_radius(self, atomic_number):
        self._check(atomic_number)
        return self.RADII[atomic_number]

    def scaled_radius(self, atomic_number):
        self._check(atomic_number)
        return self.radii[atomic_number]

    def apply_scale(self, factor):
        self.radii = {z: r * factor for z, r in self.radii.items()}


def make_structure(atoms, lattice=None):
    """Build a StructureModel from (element, atomic_number, xyz) tuples."""
    if lattice is None:
        lattice = Lattice(np.eye(3) * 5.0)
    return StructureModel(
        lattice=lattice,
        atoms=tuple(
            Atom(index=i, element=element, atomic_number=z, coordinates=xyz, tag=f"{element}{i + 1}")
            for i, (element, z, xyz) in enumerate(atoms)
        ),
    )


@pytest.fixture
def fake_elements():
    return FakeElementProvider()


@pytest.fixture
def si_o_structure():
    """Two silicon atoms and one oxygen atom in a 5 Angstrom cubic cell."""
    return make_structure(
        [
            ("si", 14, (0.0, 0.0, 0.0)),
            ("o", 8, (1.25, 1.25, 1.25)),
            ("si", 14, (2.5, 2.5, 0.0)),
        ]
    )


@pytest.fixture
def mixed_structure():
    return make_structure(
        [
            ("si", 14, (0.0, 0.0, 0.0)),
            ("o", 8, (1.0, 0.0, 0.0)),
            ("c", 6, (0.0, 1.0, 0.0)),
            ("ge", 32, (0.0, 0.0, 1.0)),
            ("o", 8, (1.0, 1.0, 1.0)),
        ]
    )


SI_O_SKELETON = """title
silicon and oxygen test cell
end
cell
5.0 5.0 5.0 90.0 90.0 90.0
frac 3
si1 0.0 0.0 0.0
o1 0.25 0.25 0.25
si2 0.5 0.5 0.0
space 1_a
supercell 1 1 1
full
"""


@pytest.fixture
def si_o_skeleton(tmp_path):
    path = tmp_path / "olcao.skl"
    path.write_text(SI_O_SKELETON)
    return path


@pytest.fixture
def structure_factory():
    return make_structure
