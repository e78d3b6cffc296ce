"""Seekable per-column pseudo-random number streams."""

from tpcdsgen.errors import InvariantViolationError

MULTIPLIER = 16807
MODULUS = 2147483647  # 2^31 - 1
DEFAULT_SEED_BASE = 19620718
MAX_COLUMNS = 799
SEED_SPACING = MODULUS // MAX_COLUMNS


class RandomNumberStream:
    """
    Park-Miller minimal standard generator bound to one generator column.

    Each row of a table consumes a fixed budget of ``seeds_per_row`` draws from
    the stream, which makes the state at the start of any row a closed-form
    function of the row number. ``skip_rows`` uses that to seek directly to a
    row without producing the draws in between.
    """

    def __init__(self, global_column_number: int, seeds_per_row: int, seed_base: int = DEFAULT_SEED_BASE):
        if seeds_per_row < 1:
            raise ValueError(f"seeds_per_row must be positive, got {seeds_per_row}")
        self.global_column_number = global_column_number
        self.seeds_per_row = seeds_per_row
        self.initial_seed = (seed_base + global_column_number * SEED_SPACING) % MODULUS
        self.seed = self.initial_seed
        self.seeds_used = 0

    def next_random(self) -> int:
        """Advance the stream by one draw and return the new state."""
        self.seed = (self.seed * MULTIPLIER) % MODULUS
        self.seeds_used += 1
        return self.seed

    def skip_rows(self, number_of_rows: int) -> None:
        """Position the stream at the start of row ``number_of_rows + 1``."""
        values_to_skip = number_of_rows * self.seeds_per_row
        self.seed = (pow(MULTIPLIER, values_to_skip, MODULUS) * self.initial_seed) % MODULUS
        self.seeds_used = 0

    def skip_draws(self, count: int) -> None:
        """Advance by ``count`` draws without materializing them."""
        if count <= 0:
            return
        self.seed = (pow(MULTIPLIER, count, MODULUS) * self.seed) % MODULUS
        self.seeds_used += count

    def consume_remaining_seeds_for_row(self) -> None:
        """Move to the next row boundary, whatever this row actually drew."""
        self.skip_draws(self.seeds_per_row - self.seeds_used)
        self.reset_seeds_used()

    def reset_seeds_used(self) -> None:
        if self.seeds_used > self.seeds_per_row:
            raise InvariantViolationError(
                f"Stream for column {self.global_column_number} used {self.seeds_used} seeds "
                f"but only {self.seeds_per_row} are available per row"
            )
        self.seeds_used = 0

    def __repr__(self) -> str:
        return (
            f"RandomNumberStream(column={self.global_column_number}, "
            f"seeds_per_row={self.seeds_per_row}, seed={self.seed})"
        )
