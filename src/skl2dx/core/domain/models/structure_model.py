#!/usr/bin/env python3
# src/skl2dx/core/domain/models/structure_model.py

"""
Domain model representing a crystal structure: a lattice and its atoms.
"""

from dataclasses import dataclass
from typing import List, Tuple
import numpy as np

from .atom import Atom
from .lattice import Lattice


@dataclass(frozen=True, eq=False)
class StructureModel:
    """Immutable structure as read from a skeleton file."""

    lattice: Lattice
    atoms: Tuple[Atom, ...]
    title: str = ""
    space_group: str = "1_a"
    supercell: Tuple[int, int, int] = (1, 1, 1)

    def __post_init__(self):
        object.__setattr__(self, "atoms", tuple(self.atoms))

    @property
    def num_atoms(self) -> int:
        return len(self.atoms)

    @property
    def element_names(self) -> List[str]:
        return [atom.element for atom in self.atoms]

    @property
    def atomic_numbers(self) -> np.ndarray:
        return np.array([atom.atomic_number for atom in self.atoms], dtype=int)

    @property
    def coordinates(self) -> np.ndarray:
        """Get Cartesian coordinates of all atoms.

        Returns:
            numpy array of shape (n_atoms, 3) containing xyz coordinates
        """
        return np.array([atom.coordinates for atom in self.atoms], dtype=float).reshape(
            -1, 3
        )

    @property
    def species(self) -> List[str]:
        """Unique element names in order of first appearance."""
        return list(dict.fromkeys(self.element_names))
