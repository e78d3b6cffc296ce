"""Per-table row generators."""

from .base import RowGenerator, RowGeneratorResult, TableRow
from .registry import GENERATORS, create_row_generator

__all__ = ["RowGenerator", "RowGeneratorResult", "TableRow", "GENERATORS", "create_row_generator"]
