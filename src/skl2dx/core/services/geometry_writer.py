# src/skl2dx/core/services/geometry_writer.py
"""
Writers for the two OpenDX documents: the lattice box and the atom geometry.

Both documents are OpenDX "native" files: numbered objects holding grids or
arrays, followed by a field object combining them by component name.
"""

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, Union

from ..domain.interfaces.element_provider import ElementAttributeProvider
from ..domain.models.lattice import Lattice
from ..domain.models.selection import InclusionMask
from ..domain.models.structure_model import StructureModel
from ..exceptions import OutputFileError

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

LATTICE_FIELD_NAME = "lattice"
ATOM_FIELD_NAME = "atoms"
DEP_POSITIONS = 'attribute "dep" string "positions"'


def format_number(value: float) -> str:
    """Format a float compactly, without a negative sign on zero."""
    value = float(value) + 0.0
    return f"{value:.10g}"


def format_row(values: Iterable[float]) -> str:
    return " ".join(format_number(value) for value in values)


def _array_header(object_id: int, items: int, shape: Optional[int] = None) -> str:
    if shape is None:
        return f"object {object_id} class array type float rank 0 items {items} data follows"
    return (
        f"object {object_id} class array type float rank 1 shape {shape} "
        f"items {items} data follows"
    )


def _field(name: str, components: Sequence[str]) -> List[str]:
    lines = [f'object "{name}" class field']
    for object_id, component in enumerate(components, start=1):
        lines.append(f'component "{component}" value {object_id}')
    return lines


def iter_lattice_document(lattice: Lattice) -> Iterator[str]:
    """Yield the lines of the lattice box document."""
    yield "object 1 class gridpositions counts 2 2 2"
    yield "origin 0 0 0"
    for vector in lattice.vectors:
        yield f"delta {format_row(vector)}"
    yield "object 2 class gridconnections counts 2 2 2"
    yield _array_header(3, 8)
    for _ in range(8):
        yield "1.0"
    yield DEP_POSITIONS
    yield from _field(LATTICE_FIELD_NAME, ("positions", "connections", "data"))
    yield "end"


def iter_atom_document(
    structure: StructureModel,
    elements: ElementAttributeProvider,
    mask: InclusionMask,
    greyscale: bool = False,
) -> Iterator[str]:
    """
    Yield the lines of the atom geometry document.

    Positions, colors and sizes all list the included atoms in ascending
    original order, so row i of each array describes the same atom.

    Args:
        structure: Structure providing coordinates and atomic numbers
        elements: Provider of colors and (already scaled) radii
        mask: Inclusion flags from the atom selector
        greyscale: Use greyscale values instead of full color
    """
    if len(mask) != structure.num_atoms:
        raise ValueError(
            f"Inclusion mask has {len(mask)} entries for {structure.num_atoms} atoms"
        )

    indices = mask.indices
    items = mask.count
    coordinates = structure.coordinates[indices]
    atomic_numbers = structure.atomic_numbers[indices]
    color_of = elements.grey_color if greyscale else elements.color

    yield _array_header(1, items, shape=3)
    for position in coordinates:
        yield format_row(position)

    yield _array_header(2, items)
    for z in atomic_numbers:
        yield format_number(color_of(int(z)))
    yield DEP_POSITIONS

    yield _array_header(3, items)
    for z in atomic_numbers:
        yield format_number(elements.scaled_radius(int(z)))
    yield DEP_POSITIONS

    yield from _field(ATOM_FIELD_NAME, ("positions", "data", "sizes"))
    yield "end"


def format_lattice_document(lattice: Lattice) -> str:
    return "\n".join(iter_lattice_document(lattice)) + "\n"


def format_atom_document(
    structure: StructureModel,
    elements: ElementAttributeProvider,
    mask: InclusionMask,
    greyscale: bool = False,
) -> str:
    return "\n".join(iter_atom_document(structure, elements, mask, greyscale)) + "\n"


def _open_output(path: Path):
    try:
        return open(path, "w")
    except OSError as e:
        raise OutputFileError(str(path), e.strerror or str(e)) from e


class GeometryWriter:
    """Writes the lattice and atom documents into an output directory."""

    def __init__(
        self,
        output_dir: PathLike = ".",
        lattice_file: str = "lattice.dx",
        atom_file: str = "atoms.dx",
    ):
        self.output_dir = Path(output_dir)
        self.lattice_path = self.output_dir / lattice_file
        self.atom_path = self.output_dir / atom_file

    def write_lattice(self, lattice: Lattice) -> Path:
        """Write the lattice box document, replacing any existing file."""
        with _open_output(self.lattice_path) as fhandle:
            for line in iter_lattice_document(lattice):
                fhandle.write(line + "\n")
        logger.info(f"Wrote lattice box to {self.lattice_path}")
        return self.lattice_path

    def write_atoms(
        self,
        structure: StructureModel,
        elements: ElementAttributeProvider,
        mask: InclusionMask,
        greyscale: bool = False,
    ) -> Path:
        """Write the atom geometry document, replacing any existing file."""
        with _open_output(self.atom_path) as fhandle:
            for line in iter_atom_document(structure, elements, mask, greyscale):
                fhandle.write(line + "\n")
        logger.info(f"Wrote {mask.count} atoms to {self.atom_path}")
        return self.atom_path

    def write_all(
        self,
        structure: StructureModel,
        elements: ElementAttributeProvider,
        mask: InclusionMask,
        greyscale: bool = False,
    ) -> List[Path]:
        """
        Write both documents, lattice first.

        A failure on the atom document leaves the lattice document in place.
        """
        return [
            self.write_lattice(structure.lattice),
            self.write_atoms(structure, elements, mask, greyscale),
        ]
