"""Data generation engine."""

from .chunks import ChunkBoundaries, split_work
from .driver import TableGenerator
from .pipeline import generate_data
from .results import Results
from .writer import FileSink, format_row, get_path

__all__ = [
    "ChunkBoundaries",
    "split_work",
    "TableGenerator",
    "generate_data",
    "Results",
    "FileSink",
    "format_row",
    "get_path",
]
