#!/usr/bin/env python3
# src/skl2dx/core/domain/models/lattice.py

"""
Domain model representing the three lattice vectors of a cell.
"""

from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True, eq=False)
class Lattice:
    """Lattice vectors in Angstrom, one vector per row."""

    vectors: np.ndarray

    def __post_init__(self):
        vectors = np.array(self.vectors, dtype=float)
        if vectors.shape != (3, 3):
            raise ValueError(f"Lattice needs a 3x3 array, got shape {vectors.shape}")
        vectors.setflags(write=False)
        object.__setattr__(self, "vectors", vectors)

    @classmethod
    def from_parameters(
        cls,
        a: float,
        b: float,
        c: float,
        alpha: float,
        beta: float,
        gamma: float,
    ) -> "Lattice":
        """
        Build lattice vectors from cell lengths and angles.

        The a vector lies along x and the b vector in the xy plane.

        Args:
            a, b, c: Cell lengths in Angstrom
            alpha, beta, gamma: Cell angles in degrees

        Returns:
            Lattice with the corresponding Cartesian vectors
        """
        alpha_r, beta_r, gamma_r = np.radians([alpha, beta, gamma])
        cos_alpha, cos_beta, cos_gamma = np.cos([alpha_r, beta_r, gamma_r])
        sin_gamma = np.sin(gamma_r)

        cx = c * cos_beta
        cy = c * (cos_alpha - cos_beta * cos_gamma) / sin_gamma
        cz_squared = c * c - cx * cx - cy * cy
        if cz_squared <= 0.0:
            raise ValueError(
                f"Cell angles {alpha}, {beta}, {gamma} do not describe a valid cell"
            )

        vectors = np.array(
            [
                [a, 0.0, 0.0],
                [b * cos_gamma, b * sin_gamma, 0.0],
                [cx, cy, np.sqrt(cz_squared)],
            ]
        )
        # Clear round-off so orthogonal cells give exact zeros
        vectors[np.abs(vectors) < 1e-10] = 0.0
        return cls(vectors)

    @property
    def volume(self) -> float:
        return float(abs(np.linalg.det(self.vectors)))

    def to_cartesian(self, fractional: np.ndarray) -> np.ndarray:
        """Convert fractional coordinates (N x 3) to Cartesian coordinates."""
        return np.asarray(fractional, dtype=float) @ self.vectors

    def scaled(self, na: int, nb: int, nc: int) -> "Lattice":
        """Return the lattice of an na x nb x nc supercell."""
        return Lattice(self.vectors * np.array([[na], [nb], [nc]], dtype=float))
