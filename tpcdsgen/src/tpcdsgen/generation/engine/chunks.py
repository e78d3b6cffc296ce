"""Partitioning of a table's rows into chunks."""

from dataclasses import dataclass

from tpcdsgen.generation.constants import SCD_BLOCK_SIZE


@dataclass(frozen=True)
class ChunkBoundaries:
    """Inclusive 1-based row range of one chunk; empty when last_row < first_row."""

    first_row: int
    last_row: int

    @property
    def row_count(self) -> int:
        return max(0, self.last_row - self.first_row + 1)

    def is_empty(self) -> bool:
        return self.row_count == 0


def _boundary(chunk: int, rows_per_chunk: int, keeps_history: bool) -> int:
    boundary = chunk * rows_per_chunk
    if keeps_history:
        # Business entities span whole blocks, so chunks must not split one
        boundary -= boundary % SCD_BLOCK_SIZE
    return boundary


def split_work(table, session) -> ChunkBoundaries:
    """
    Rows of ``table`` that chunk ``session.chunk_number`` of ``session.parallelism`` generates.

    Rows are split into contiguous ranges of ``total // parallelism`` rows,
    the remainder going to the last chunk. Small tables are generated entirely
    by the first chunk. A child table is driven by its parent's rows.
    """
    if table.is_child():
        table = table.parent

    total = session.scaling.get_row_count(table)
    parallelism = session.parallelism
    chunk = session.chunk_number

    if table.is_small or parallelism == 1:
        if chunk == 1:
            return ChunkBoundaries(1, total)
        return ChunkBoundaries(1, 0)

    rows_per_chunk = total // parallelism
    first_row = _boundary(chunk - 1, rows_per_chunk, table.keeps_history) + 1
    if chunk == parallelism:
        last_row = total
    else:
        last_row = _boundary(chunk, rows_per_chunk, table.keeps_history)
    return ChunkBoundaries(first_row, last_row)
