"""Row generator contract shared by every table."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Optional

from tpcdsgen.errors import GenerationError
from tpcdsgen.generation.constants import NO_VALUE_KEY
from tpcdsgen.generation.random.stream import RandomNumberStream
from tpcdsgen.generation.types.dates import format_julian_days
from tpcdsgen.schema.generator_columns import GeneratorColumn
from tpcdsgen.schema.table import Table


@dataclass(frozen=True)
class TableRow(ABC):
    """
    One output row.

    Bit ``i`` of ``null_bitmap`` set means output column ``i`` is written as
    null. Subclasses list their fields in output order and implement
    :meth:`values`.
    """

    null_bitmap: int

    def is_null(self, column_index: int) -> bool:
        return (self.null_bitmap >> column_index) & 1 == 1

    def get_string_or_null(self, value, column_index: int) -> Optional[str]:
        if value is None or self.is_null(column_index):
            return None
        return str(value)

    def get_key_or_null(self, key: int, column_index: int) -> Optional[str]:
        if key == NO_VALUE_KEY or self.is_null(column_index):
            return None
        return str(key)

    def get_date_string_or_null(self, julian_days: int, column_index: int) -> Optional[str]:
        if self.is_null(column_index):
            return None
        return format_julian_days(julian_days)

    def get_decimal_or_null(self, value: Decimal, column_index: int) -> Optional[str]:
        if self.is_null(column_index):
            return None
        return f"{value:f}"

    def get_flag_or_null(self, flag: bool, column_index: int) -> Optional[str]:
        if self.is_null(column_index):
            return None
        return "Y" if flag else "N"

    @abstractmethod
    def values(self) -> List[Optional[str]]:
        """Field values in output order; ``None`` marks a null field."""


@dataclass
class RowGeneratorResult:
    """
    Rows produced for one row number.

    ``rows[0]`` is the table's own row; further entries are child rows.
    ``should_end_row`` is false while a multi-line parent row is still open.
    """

    rows: List[TableRow] = field(default_factory=list)
    should_end_row: bool = True


class RowGenerator(ABC):
    """
    Base class of the per-table row generators.

    A generator owns one random stream per generator column of its table and
    the previous-row state it needs for slowly changing dimensions. Instances
    are created fresh for every chunk and never shared between threads.
    """

    table: Table

    def __init__(self, table: Table):
        if table.generator_columns is None:
            raise GenerationError(f"Table {table.table_name} has no generator columns")
        self.table = table
        self._streams: Dict[GeneratorColumn, RandomNumberStream] = {
            column: RandomNumberStream(column.global_column_number, column.seeds_per_row)
            for column in table.generator_columns
        }

    def get_random_number_stream(self, column: GeneratorColumn) -> RandomNumberStream:
        try:
            return self._streams[column]
        except KeyError:
            raise GenerationError(
                f"Column {column!r} does not belong to this generator", table=self.table.table_name
            ) from None

    def skip_rows_until_starting_row_number(self, starting_row_number: int) -> None:
        """Seek every stream to the first draw of ``starting_row_number``."""
        for stream in self._streams.values():
            stream.skip_rows(starting_row_number - 1)

    def consume_remaining_seeds_for_row(self) -> None:
        for stream in self._streams.values():
            stream.consume_remaining_seeds_for_row()

    @abstractmethod
    def generate_row_and_child_rows(
        self,
        row_number: int,
        session,
        parent_row_generator: Optional["RowGenerator"],
        child_row_generator: Optional["RowGenerator"],
    ) -> RowGeneratorResult:
        """
        Produce the row for ``row_number`` and any child rows.

        Args:
            row_number: 1-based row number; strictly ascending per instance
            session: Run configuration
            parent_row_generator: Generator of the parent table, for child tables
            child_row_generator: Generator of the child table, for parent tables

        Returns:
            RowGeneratorResult with the rows and the end-of-row flag
        """
