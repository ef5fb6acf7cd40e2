"""Configuration of a single skeleton to OpenDX conversion run."""

import math
from dataclasses import dataclass, field
from typing import List

DEFAULT_INPUT_FILE = "olcao.skl"
DEFAULT_LATTICE_FILE = "lattice.dx"
DEFAULT_ATOM_FILE = "atoms.dx"


@dataclass
class ConversionConfig:
    """Settings for one batch conversion."""

    input_path: str = DEFAULT_INPUT_FILE
    scale_factor: float = 1.0
    elements: List[str] = field(default_factory=list)
    greyscale: bool = False
    output_dir: str = "."
    lattice_file: str = DEFAULT_LATTICE_FILE
    atom_file: str = DEFAULT_ATOM_FILE

    def __post_init__(self):
        if not math.isfinite(self.scale_factor) or self.scale_factor <= 0.0:
            raise ValueError(
                f"Scale factor must be a positive number, got {self.scale_factor}"
            )
