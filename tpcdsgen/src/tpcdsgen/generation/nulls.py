"""Per-row null bitmaps."""

from tpcdsgen.generation.random.stream import RandomNumberStream
from tpcdsgen.generation.random.values import generate_uniform_random_int, generate_uniform_random_key

MAX_KEY = 2147483647


def create_null_bitmap(table, stream: RandomNumberStream) -> int:
    """
    Draw the null bitmap of one row.

    Bit ``i`` set means output column ``i`` is null. Both draws are always
    taken so the stream stays aligned whether or not the row gets nulls.
    """
    threshold = generate_uniform_random_int(0, 9999, stream)
    bitmap = generate_uniform_random_key(1, MAX_KEY, stream)
    if threshold < table.null_basis_points:
        return bitmap & ~table.not_null_bitmap
    return 0
