"""Tests for the OpenDX lattice and atom documents."""

import numpy as np
import pytest

from skl2dx.core.domain.models.lattice import Lattice
from skl2dx.core.domain.models.selection import InclusionMask, SelectionCriteria
from skl2dx.core.exceptions import OutputFileError
from skl2dx.core.services.atom_selector import select_atoms
from skl2dx.core.services.geometry_writer import (
    GeometryWriter,
    format_atom_document,
    format_lattice_document,
    format_number,
)


def parse_arrays(document):
    """Split an atom document into {object id: (header, data rows, trailer)}."""
    objects = {}
    current = None
    for line in document.splitlines():
        if line.startswith("object "):
            current = line.split()[1]
            objects[current] = {"header": line, "rows": [], "attributes": []}
        elif line.startswith(("attribute", "component")):
            objects[current]["attributes"].append(line)
        elif line != "end":
            objects[current]["rows"].append(line)
    return objects


def declared_items(header):
    parts = header.split()
    return int(parts[parts.index("items") + 1])


class TestFormatNumber:
    @pytest.mark.parametrize(
        "value, expected",
        [(5.0, "5"), (0.0, "0"), (-0.0, "0"), (1.25, "1.25"), (-2.5, "-2.5"), (0.1, "0.1")],
    )
    def test_format(self, value, expected):
        assert format_number(value) == expected


class TestLatticeDocument:
    def test_cubic_lattice(self):
        document = format_lattice_document(Lattice(np.eye(3) * 5.0))

        assert document.splitlines() == [
            "object 1 class gridpositions counts 2 2 2",
            "origin 0 0 0",
            "delta 5 0 0",
            "delta 0 5 0",
            "delta 0 0 5",
            "object 2 class gridconnections counts 2 2 2",
            "object 3 class array type float rank 0 items 8 data follows",
            *["1.0"] * 8,
            'attribute "dep" string "positions"',
            'object "lattice" class field',
            'component "positions" value 1',
            'component "connections" value 2',
            'component "data" value 3',
            "end",
        ]

    def test_vector_order(self):
        vectors = [[3.0, 0.0, 0.0], [1.5, 2.5, 0.0], [0.5, 0.5, 4.0]]
        lines = format_lattice_document(Lattice(vectors)).splitlines()

        assert lines[2:5] == ["delta 3 0 0", "delta 1.5 2.5 0", "delta 0.5 0.5 4"]


class TestAtomDocument:
    def test_all_atoms(self, si_o_structure, fake_elements):
        fake_elements.apply_scale(2.0)
        mask = select_atoms(si_o_structure, SelectionCriteria())

        objects = parse_arrays(format_atom_document(si_o_structure, fake_elements, mask))

        assert objects["1"]["header"] == (
            "object 1 class array type float rank 1 shape 3 items 3 data follows"
        )
        assert objects["1"]["rows"] == ["0 0 0", "1.25 1.25 1.25", "2.5 2.5 0"]
        assert objects["2"]["header"] == "object 2 class array type float rank 0 items 3 data follows"
        assert objects["2"]["rows"] == ["0.14", "0.08", "0.14"]
        assert objects["2"]["attributes"] == ['attribute "dep" string "positions"']
        assert [float(r) for r in objects["3"]["rows"]] == pytest.approx([2.2, 1.4, 2.2])
        assert objects["3"]["attributes"] == ['attribute "dep" string "positions"']
        assert objects['"atoms"']["attributes"] == [
            'component "positions" value 1',
            'component "data" value 2',
            'component "sizes" value 3',
        ]

    def test_object_order(self, si_o_structure, fake_elements):
        mask = select_atoms(si_o_structure, SelectionCriteria())
        lines = format_atom_document(si_o_structure, fake_elements, mask).splitlines()

        headers = [line for line in lines if line.startswith("object")]
        assert [h.split()[1] for h in headers] == ["1", "2", "3", '"atoms"']
        assert lines[-1] == "end"

    def test_filtered(self, si_o_structure, fake_elements):
        mask = select_atoms(si_o_structure, SelectionCriteria.from_names(["si"]))

        objects = parse_arrays(format_atom_document(si_o_structure, fake_elements, mask))

        for object_id in ("1", "2", "3"):
            assert declared_items(objects[object_id]["header"]) == 2
            assert len(objects[object_id]["rows"]) == 2
        assert objects["1"]["rows"] == ["0 0 0", "2.5 2.5 0"]
        assert objects["2"]["rows"] == ["0.14", "0.14"]

    def test_rows_describe_same_atom(self, mixed_structure, fake_elements):
        mask = select_atoms(mixed_structure, SelectionCriteria.from_names(["ge", "o"]))

        objects = parse_arrays(format_atom_document(mixed_structure, fake_elements, mask))

        included = [mixed_structure.atoms[i] for i in mask.indices]
        for i, atom in enumerate(included):
            assert objects["1"]["rows"][i] == " ".join(format_number(v) for v in atom.coordinates)
            assert float(objects["2"]["rows"][i]) == pytest.approx(atom.atomic_number / 100)
            assert float(objects["3"]["rows"][i]) == pytest.approx(
                fake_elements.scaled_radius(atom.atomic_number)
            )

    def test_empty_selection(self, si_o_structure, fake_elements):
        mask = select_atoms(si_o_structure, SelectionCriteria.from_names(["ge"]))

        lines = format_atom_document(si_o_structure, fake_elements, mask).splitlines()

        assert lines == [
            "object 1 class array type float rank 1 shape 3 items 0 data follows",
            "object 2 class array type float rank 0 items 0 data follows",
            'attribute "dep" string "positions"',
            "object 3 class array type float rank 0 items 0 data follows",
            'attribute "dep" string "positions"',
            'object "atoms" class field',
            'component "positions" value 1',
            'component "data" value 2',
            'component "sizes" value 3',
            "end",
        ]

    @pytest.mark.parametrize("names", [[], ["si"], ["o"], ["o", "si"], ["c"]])
    def test_item_counts_follow_mask(self, si_o_structure, fake_elements, names):
        mask = select_atoms(si_o_structure, SelectionCriteria.from_names(names))

        objects = parse_arrays(format_atom_document(si_o_structure, fake_elements, mask))

        for object_id in ("1", "2", "3"):
            assert declared_items(objects[object_id]["header"]) == mask.count
            assert len(objects[object_id]["rows"]) == mask.count

    def test_greyscale(self, si_o_structure, fake_elements):
        mask = select_atoms(si_o_structure, SelectionCriteria())

        objects = parse_arrays(
            format_atom_document(si_o_structure, fake_elements, mask, greyscale=True)
        )

        assert objects["2"]["rows"] == ["0.014", "0.008", "0.014"]

    def test_mask_length_mismatch(self, si_o_structure, fake_elements):
        with pytest.raises(ValueError):
            format_atom_document(si_o_structure, fake_elements, InclusionMask([True]))


class TestGeometryWriter:
    def test_write_all(self, tmp_path, si_o_structure, fake_elements):
        writer = GeometryWriter(tmp_path)
        mask = select_atoms(si_o_structure, SelectionCriteria())

        paths = writer.write_all(si_o_structure, fake_elements, mask)

        assert paths == [tmp_path / "lattice.dx", tmp_path / "atoms.dx"]
        assert (tmp_path / "lattice.dx").read_text() == format_lattice_document(
            si_o_structure.lattice
        )
        assert (tmp_path / "atoms.dx").read_text() == format_atom_document(
            si_o_structure, fake_elements, mask
        )

    def test_overwrites_existing(self, tmp_path, si_o_structure):
        (tmp_path / "box.dx").write_text("stale content\n" * 50)

        GeometryWriter(tmp_path, lattice_file="box.dx").write_lattice(si_o_structure.lattice)

        assert "stale" not in (tmp_path / "box.dx").read_text()

    def test_missing_directory(self, tmp_path, si_o_structure):
        writer = GeometryWriter(tmp_path / "missing")

        with pytest.raises(OutputFileError) as excinfo:
            writer.write_lattice(si_o_structure.lattice)
        assert "lattice.dx" in str(excinfo.value)

    def test_atom_file_failure_keeps_lattice(self, tmp_path, si_o_structure, fake_elements):
        (tmp_path / "atoms.dx").mkdir()
        writer = GeometryWriter(tmp_path)
        mask = select_atoms(si_o_structure, SelectionCriteria())

        with pytest.raises(OutputFileError) as excinfo:
            writer.write_all(si_o_structure, fake_elements, mask)

        assert excinfo.value.path == str(tmp_path / "atoms.dx")
        assert (tmp_path / "lattice.dx").exists()
