"""Row counts per table as a function of the scale factor."""

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Tuple
import numpy as np

from tpcdsgen.errors import InvalidOptionError

# Reference scale factors (in GB) that carry explicit row counts
DEFINED_SCALES: Tuple[int, ...] = (1, 10, 100, 300, 1000, 3000, 10000, 30000, 100000)
MAX_SCALE = DEFINED_SCALES[-1]


class ScalingModel(Enum):
    STATIC = "static"
    LINEAR = "linear"
    LOGARITHMIC = "logarithmic"


@dataclass(frozen=True)
class ScalingInfo:
    """
    How one table grows with the scale factor.

    ``row_counts`` holds a single value for static tables and one value per
    entry of ``DEFINED_SCALES`` otherwise. Counts must not decrease from one
    tier to the next.
    """

    model: ScalingModel
    row_counts: Tuple[int, ...]

    def __post_init__(self):
        expected = 1 if self.model is ScalingModel.STATIC else len(DEFINED_SCALES)
        if len(self.row_counts) != expected:
            raise ValueError(f"{self.model.value} scaling needs {expected} row counts, got {len(self.row_counts)}")
        if any(b < a for a, b in zip(self.row_counts, self.row_counts[1:])):
            raise ValueError(f"Row counts must be non-decreasing: {self.row_counts}")

    @classmethod
    def static(cls, row_count: int) -> "ScalingInfo":
        return cls(ScalingModel.STATIC, (row_count,))

    @classmethod
    def linear(cls, rows_per_scale: int) -> "ScalingInfo":
        return cls(ScalingModel.LINEAR, tuple(rows_per_scale * scale for scale in DEFINED_SCALES))

    @classmethod
    def logarithmic(cls, *row_counts: int) -> "ScalingInfo":
        return cls(ScalingModel.LOGARITHMIC, tuple(row_counts))


@lru_cache(maxsize=4096)
def _row_count(info: ScalingInfo, scale: float) -> int:
    if info.model is ScalingModel.STATIC:
        return info.row_counts[0]

    if info.model is ScalingModel.LINEAR:
        # Below scale 1 the count shrinks towards zero rows at scale 0
        scales = np.array((0,) + DEFINED_SCALES, dtype=np.float64)
        counts = np.array((0,) + info.row_counts, dtype=np.float64)
        return max(1, int(np.interp(scale, scales, counts)))

    if scale < DEFINED_SCALES[0]:
        # Below scale 1 logarithmic tables shrink linearly like fact tables
        return max(1, int(scale * info.row_counts[0]))
    scales = np.log10(np.array(DEFINED_SCALES, dtype=np.float64))
    counts = np.array(info.row_counts, dtype=np.float64)
    return int(np.interp(np.log10(scale), scales, counts))


class Scaling:
    """Row count oracle for one scale factor."""

    def __init__(self, scale: float):
        if not 0 < scale <= MAX_SCALE:
            raise InvalidOptionError("scale", scale, f"Scale must be greater than 0 and at most {MAX_SCALE}")
        self.scale = float(scale)

    def get_scale(self) -> float:
        return self.scale

    def get_row_count(self, table) -> int:
        return _row_count(table.scaling_info, self.scale)

    def get_id_count(self, table) -> int:
        """
        Number of distinct business keys in a table.

        History-keeping tables hold 3 business keys for every 6 rows (one with
        a single version, one with two, one with three); a partial block adds
        the keys it has started.
        """
        row_count = self.get_row_count(table)
        if not table.keeps_history:
            return row_count
        unique_count = (row_count // 6) * 3
        remainder = row_count % 6
        if remainder == 1:
            unique_count += 1
        elif remainder in (2, 3):
            unique_count += 2
        elif remainder in (4, 5):
            unique_count += 3
        return unique_count

    def __repr__(self) -> str:
        return f"Scaling(scale={self.scale:g})"
