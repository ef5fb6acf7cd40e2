# src/skl2dx/core/services/atom_selector.py
"""Choose the atoms that go into the atom document."""

import logging
import numpy as np

from ..domain.models.selection import InclusionMask, SelectionCriteria
from ..domain.models.structure_model import StructureModel

logger = logging.getLogger(__name__)


def select_atoms(structure: StructureModel, criteria: SelectionCriteria) -> InclusionMask:
    """
    Build the inclusion mask for a structure.

    An atom is included when its element matches any name in the allow-list,
    compared case-insensitively. An empty allow-list includes every atom.

    Args:
        structure: Structure whose atoms are filtered
        criteria: Element allow-list

    Returns:
        InclusionMask with one flag per atom in original order
    """
    if criteria.show_all:
        flags = np.ones(structure.num_atoms, dtype=bool)
    else:
        flags = np.fromiter(
            (criteria.matches(name) for name in structure.element_names),
            dtype=bool,
            count=structure.num_atoms,
        )

    mask = InclusionMask(flags)
    logger.debug(
        f"Selected {mask.count} of {structure.num_atoms} atoms "
        f"(elements: {', '.join(sorted(criteria.elements)) or 'all'})"
    )
    return mask
