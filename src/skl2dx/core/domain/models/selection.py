#!/usr/bin/env python3
# src/skl2dx/core/domain/models/selection.py

"""
Domain models for choosing which atoms end up in the atom document.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable
import numpy as np


@dataclass(frozen=True)
class SelectionCriteria:
    """Element allow-list. An empty list shows every atom."""

    elements: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(
            self, "elements", frozenset(name.lower() for name in self.elements)
        )

    @classmethod
    def from_names(cls, names: Iterable[str] = ()) -> "SelectionCriteria":
        return cls(frozenset(name.strip() for name in names if name.strip()))

    @property
    def show_all(self) -> bool:
        return not self.elements

    def matches(self, element: str) -> bool:
        return element.lower() in self.elements


@dataclass(frozen=True)
class InclusionMask:
    """One inclusion flag per atom, in original atom order."""

    flags: np.ndarray

    def __post_init__(self):
        flags = np.array(self.flags, dtype=bool).reshape(-1)
        flags.setflags(write=False)
        object.__setattr__(self, "flags", flags)

    @property
    def count(self) -> int:
        return int(np.count_nonzero(self.flags))

    @property
    def indices(self) -> np.ndarray:
        """Indices of the included atoms, ascending."""
        return np.flatnonzero(self.flags)

    def __len__(self) -> int:
        return len(self.flags)

    def __eq__(self, other) -> bool:
        if not isinstance(other, InclusionMask):
            return NotImplemented
        return np.array_equal(self.flags, other.flags)

    def __hash__(self) -> int:
        return hash(self.flags.tobytes())
