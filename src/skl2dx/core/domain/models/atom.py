#!/usr/bin/env python3
# src/skl2dx/core/domain/models/atom.py

"""
Domain model representing an atom in a crystal structure.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Atom:
    """Represents an atom of a structure read from a skeleton file."""

    index: int
    element: str
    atomic_number: int
    coordinates: Tuple[float, float, float]
    tag: str = ""
