# src/skl2dx/infrastructure/readers/skeleton_reader.py
"""Reader for OLCAO skeleton (.skl) structure files."""

import itertools
import logging
import re
from typing import Iterator, List, Optional, Tuple

import numpy as np

from ...core.domain.interfaces.element_provider import ElementAttributeProvider
from ...core.domain.interfaces.structure_reader import StructureReader
from ...core.domain.models.atom import Atom
from ...core.domain.models.lattice import Lattice
from ...core.domain.models.structure_model import StructureModel
from ...core.exceptions import SkeletonFormatError

logger = logging.getLogger(__name__)

_ELEMENT_PATTERN = re.compile(r"^([A-Za-z]+)")
TRIVIAL_SPACE_GROUPS = {"1", "1_a", "p1"}


def element_from_tag(tag: str) -> str:
    """
    Extract the element name from a skeleton atom tag.

    Args:
        tag: Atom tag such as "si1" or "O2_3"

    Returns:
        Lowercase element name ("si", "o")
    """
    match = _ELEMENT_PATTERN.match(tag)
    if not match:
        raise ValueError(f"Atom tag {tag!r} does not start with an element name")
    return match.group(1).lower()


class _LineSource:
    """Numbered iterator over the non-blank lines of a file."""

    def __init__(self, filepath: str, lines: List[str]):
        self.filepath = filepath
        self._lines: Iterator[Tuple[int, str]] = (
            (number, line.strip())
            for number, line in enumerate(lines, start=1)
            if line.strip()
        )
        self.line_number = 0

    def next_line(self) -> Optional[str]:
        entry = next(self._lines, None)
        if entry is None:
            return None
        self.line_number, line = entry
        return line

    def require(self, expected: str) -> str:
        line = self.next_line()
        if line is None:
            raise self.error(f"Unexpected end of file, expected {expected}")
        return line

    def error(self, message: str) -> SkeletonFormatError:
        return SkeletonFormatError(message, self.filepath, self.line_number)

    def floats(self, line: str, count: int, what: str) -> List[float]:
        parts = line.split()
        if len(parts) < count:
            raise self.error(f"Expected {count} numbers for {what}, got {len(parts)}")
        try:
            return [float(value) for value in parts[:count]]
        except ValueError:
            raise self.error(f"Invalid number in {what}: {line!r}") from None


class SkeletonReader(StructureReader):
    """
    Parses skeleton files into a StructureModel.

    Layout of a skeleton file (keywords are case-insensitive)::

        title
        <any number of title lines>
        end
        cell                       (or cellxyz followed by three vector lines)
        a b c alpha beta gamma
        frac N                     (or cart N)
        tag x y z                  (N lines)
        space 1_a
        supercell 1 1 1
        full
    """

    def read(self, filepath: str, elements: ElementAttributeProvider) -> StructureModel:
        with open(filepath, "r") as f:
            lines = f.readlines()
        return self.parse(lines, elements, filepath=str(filepath))

    def parse(
        self,
        lines: List[str],
        elements: ElementAttributeProvider,
        filepath: str = "<string>",
    ) -> StructureModel:
        source = _LineSource(filepath, lines)

        title = self._read_title(source)
        lattice = self._read_cell(source)
        tags, positions = self._read_atoms(source, lattice)
        space_group, supercell = self._read_trailer(source)

        if space_group.lower() not in TRIVIAL_SPACE_GROUPS:
            logger.warning(
                f"Space group {space_group} is not expanded; "
                "only the listed atoms are used"
            )

        if supercell != (1, 1, 1):
            tags, positions = self._replicate(tags, positions, lattice, supercell)
            lattice = lattice.scaled(*supercell)
            logger.debug(f"Built {supercell} supercell with {len(tags)} atoms")

        atoms = []
        for index, (tag, position) in enumerate(zip(tags, positions)):
            element = element_from_tag(tag)
            atoms.append(
                Atom(
                    index=index,
                    element=element,
                    atomic_number=elements.atomic_number(element),
                    coordinates=tuple(float(value) for value in position),
                    tag=tag,
                )
            )

        logger.debug(
            f"Parsed {len(atoms)} atoms from {filepath}, "
            f"cell volume {lattice.volume:.4f} A^3"
        )
        return StructureModel(
            lattice=lattice,
            atoms=tuple(atoms),
            title=title,
            space_group=space_group,
            supercell=supercell,
        )

    def _read_title(self, source: _LineSource) -> str:
        line = source.require("title")
        if line.lower() != "title":
            raise source.error(f"Expected 'title', got {line!r}")

        title_lines = []
        while True:
            line = source.require("'end' closing the title")
            if line.lower() == "end":
                return "\n".join(title_lines)
            title_lines.append(line)

    def _read_cell(self, source: _LineSource) -> Lattice:
        keyword = source.require("cell").lower()
        if keyword == "cell":
            line = source.require("cell parameters")
            a, b, c, alpha, beta, gamma = source.floats(line, 6, "cell parameters")
            try:
                return Lattice.from_parameters(a, b, c, alpha, beta, gamma)
            except ValueError as e:
                raise source.error(str(e)) from None
        if keyword == "cellxyz":
            vectors = [
                source.floats(source.require("lattice vector"), 3, "lattice vector")
                for _ in range(3)
            ]
            return Lattice(np.array(vectors))
        raise source.error(f"Expected 'cell' or 'cellxyz', got {keyword!r}")

    def _read_atoms(
        self, source: _LineSource, lattice: Lattice
    ) -> Tuple[List[str], np.ndarray]:
        header = source.require("'frac' or 'cart' atom block").split()
        kind = header[0].lower()
        if not (kind.startswith("frac") or kind.startswith("cart")):
            raise source.error(f"Expected 'frac' or 'cart', got {header[0]!r}")
        try:
            num_atoms = int(header[1])
        except (IndexError, ValueError):
            raise source.error("Atom block header needs an atom count") from None
        if num_atoms < 0:
            raise source.error(f"Invalid atom count {num_atoms}")

        tags = []
        positions = np.zeros((num_atoms, 3), dtype=float)
        for i in range(num_atoms):
            line = source.require(f"atom {i + 1} of {num_atoms}")
            tag = line.split()[0]
            if not _ELEMENT_PATTERN.match(tag):
                raise source.error(f"Atom tag {tag!r} does not start with an element name")
            tags.append(tag)
            positions[i] = source.floats(" ".join(line.split()[1:]), 3, f"atom {tag}")

        if kind.startswith("frac"):
            positions = lattice.to_cartesian(positions)
        return tags, positions

    def _read_trailer(self, source: _LineSource) -> Tuple[str, Tuple[int, int, int]]:
        space_group = "1_a"
        supercell = (1, 1, 1)
        while True:
            line = source.next_line()
            if line is None:
                return space_group, supercell
            parts = line.split()
            keyword = parts[0].lower()
            if keyword == "space":
                if len(parts) < 2:
                    raise source.error("'space' needs a space group")
                space_group = parts[1]
            elif keyword == "supercell":
                try:
                    supercell = tuple(int(value) for value in parts[1:4])
                except ValueError:
                    raise source.error(f"Invalid supercell: {line!r}") from None
                if len(supercell) != 3 or min(supercell) < 1:
                    raise source.error(f"Invalid supercell: {line!r}")
            elif keyword in ("full", "prim"):
                continue
            else:
                raise source.error(f"Unknown keyword {parts[0]!r}")

    def _replicate(
        self,
        tags: List[str],
        positions: np.ndarray,
        lattice: Lattice,
        supercell: Tuple[int, int, int],
    ) -> Tuple[List[str], np.ndarray]:
        """Copy every atom into each image cell, one whole cell after another."""
        new_tags = []
        new_positions = []
        for image in itertools.product(*(range(n) for n in supercell)):
            shift = np.asarray(image, dtype=float) @ lattice.vectors
            new_tags.extend(tags)
            new_positions.append(positions + shift)
        return new_tags, np.vstack(new_positions)
