"""Ordered row iteration over one chunk of a table."""

from typing import Iterator, List, Optional, Tuple

from tpcdsgen.errors import GenerationError
from tpcdsgen.generation.generators.registry import create_row_generator
from tpcdsgen.schema.table import Table
from .chunks import ChunkBoundaries

OutputRow = Tuple[Table, List[Optional[str]]]


class Results:
    """
    Iterate the rows of a chunk as ``(table, values)`` pairs, in row order.

    Generators are created fresh and positioned at the chunk's first row by
    jump-ahead. After every ended row all streams are advanced to the next
    row boundary. When the run targets a child table on its own, a private
    parent generator drives the iteration and only child rows are yielded.
    """

    def __init__(self, table: Table, boundaries: ChunkBoundaries, session):
        self.table = table
        self.boundaries = boundaries
        self.session = session

    def _create_generators(self):
        if self.table.is_child():
            return create_row_generator(self.table.parent), create_row_generator(self.table), True
        child_generator = None
        if self.table.has_child() and not self.session.generate_only_one_table():
            child_generator = create_row_generator(self.table.child)
        return create_row_generator(self.table), child_generator, False

    def __iter__(self) -> Iterator[OutputRow]:
        if self.boundaries.is_empty():
            return
        generator, child_generator, child_only = self._create_generators()
        generators = [g for g in (generator, child_generator) if g is not None]

        first_row = self.boundaries.first_row
        for row_generator in generators:
            row_generator.skip_rows_until_starting_row_number(first_row)

        row_number = first_row
        while row_number <= self.boundaries.last_row:
            try:
                result = generator.generate_row_and_child_rows(row_number, self.session, None, child_generator)
                if result.should_end_row:
                    for row_generator in generators:
                        row_generator.consume_remaining_seeds_for_row()
            except GenerationError as e:
                self._add_context(e, row_number)
                raise
            except Exception as e:
                raise GenerationError(
                    f"Row generation failed: {e}",
                    table=self.table.table_name,
                    row_number=row_number,
                    chunk_number=self.session.chunk_number,
                ) from e

            rows = result.rows
            if not child_only and rows:
                yield generator.table, rows[0].values()
            if child_generator is not None:
                for child_row in rows[1:]:
                    yield child_generator.table, child_row.values()

            if result.should_end_row:
                row_number += 1

    def _add_context(self, error: GenerationError, row_number: int) -> None:
        if error.table is None:
            error.table = self.table.table_name
        if error.row_number is None:
            error.row_number = row_number
        if error.chunk_number is None:
            error.chunk_number = self.session.chunk_number
