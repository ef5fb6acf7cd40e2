"""Convert OLCAO skeleton structure files into OpenDX geometry documents."""

__version__ = "0.1.0"
