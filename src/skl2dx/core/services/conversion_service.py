"""Service running one skeleton to OpenDX conversion."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

from ..domain.interfaces.element_provider import ElementAttributeProvider
from ..domain.interfaces.structure_reader import StructureReader
from ..domain.models.conversion_config import ConversionConfig
from ..domain.models.selection import InclusionMask, SelectionCriteria
from ..domain.models.structure_model import StructureModel
from .atom_selector import select_atoms
from .geometry_writer import GeometryWriter

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Outcome of a conversion run."""

    structure: StructureModel
    mask: InclusionMask
    output_files: List[Path]

    @property
    def num_atoms(self) -> int:
        return self.structure.num_atoms

    @property
    def num_selected(self) -> int:
        return self.mask.count


class ConversionService:
    """
    Runs the conversion pipeline for one configuration.

    The element provider is scaled in place during ``run``, so a service
    instance and its provider serve a single run.
    """

    def __init__(
        self,
        elements: ElementAttributeProvider,
        reader: StructureReader,
        config: ConversionConfig,
    ):
        self._elements = elements
        self._reader = reader
        self._config = config
        self._has_run = False

    def run(self) -> ConversionResult:
        """
        Scale radii, read the structure, select atoms and write both documents.

        Returns:
            ConversionResult describing what was written

        Raises:
            RuntimeError: If the service has already run
        """
        if self._has_run:
            raise RuntimeError("ConversionService.run() may only be called once")
        self._has_run = True

        config = self._config
        self._elements.apply_scale(config.scale_factor)
        logger.debug(f"Scaled covalent radii by {config.scale_factor}")

        logger.info(f"Reading structure from {config.input_path}")
        structure = self._reader.read(config.input_path, self._elements)
        logger.info(
            f"Found {structure.num_atoms} atoms of {len(structure.species)} elements"
        )

        criteria = SelectionCriteria.from_names(config.elements)
        mask = select_atoms(structure, criteria)
        if criteria.show_all:
            logger.info(f"Including all {mask.count} atoms")
        else:
            logger.info(
                f"Including {mask.count} atoms matching {', '.join(sorted(criteria.elements))}"
            )
            if mask.count == 0:
                logger.warning("No atoms matched the element filter")

        writer = GeometryWriter(config.output_dir, config.lattice_file, config.atom_file)
        output_files = writer.write_all(
            structure, self._elements, mask, greyscale=config.greyscale
        )

        return ConversionResult(structure=structure, mask=mask, output_files=output_files)
