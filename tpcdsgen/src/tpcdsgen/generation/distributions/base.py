"""Weighted lookup tables backed by packaged CSV resources."""

from pathlib import Path
from typing import Dict, List, Sequence, Tuple
import numpy as np
import pandas as pd

from tpcdsgen.generation.random.stream import RandomNumberStream
from tpcdsgen.generation.random.values import generate_uniform_random_int

WEIGHT_PREFIX = "w_"


class Distribution:
    """
    Immutable table of value tuples with one or more integer weight sets.

    Columns whose header starts with ``w_`` are weight sets, every other
    column is a value column. A pick draws one integer in
    ``[1, total_weight]`` and selects the first entry whose cumulative weight
    reaches it, so zero-weight entries are never chosen by that weight set.
    """

    def __init__(
        self,
        name: str,
        value_columns: Sequence[str],
        values: Sequence[Tuple[str, ...]],
        weights: Dict[str, np.ndarray],
    ):
        self.name = name
        self.value_columns = tuple(value_columns)
        self._values = tuple(tuple(row) for row in values)
        self._weights = {key: np.asarray(w, dtype=np.int64) for key, w in weights.items()}
        self._cumulative = {key: np.cumsum(w) for key, w in self._weights.items()}
        for array in self._weights.values():
            array.setflags(write=False)
        for array in self._cumulative.values():
            array.setflags(write=False)

    @classmethod
    def from_csv(cls, name: str, path: Path) -> "Distribution":
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        value_columns = [c for c in df.columns if not c.startswith(WEIGHT_PREFIX)]
        weight_columns = [c for c in df.columns if c.startswith(WEIGHT_PREFIX)]
        if not weight_columns:
            raise ValueError(f"Distribution '{name}' has no weight columns")
        values = list(df[value_columns].itertuples(index=False, name=None))
        weights = {
            c[len(WEIGHT_PREFIX):]: df[c].astype(np.int64).to_numpy()
            for c in weight_columns
        }
        return cls(name, value_columns, values, weights)

    @property
    def size(self) -> int:
        return len(self._values)

    @property
    def weight_sets(self) -> List[str]:
        return list(self._weights)

    def __len__(self) -> int:
        return self.size

    def _column_index(self, column) -> int:
        if isinstance(column, int):
            return column
        return self.value_columns.index(column)

    def get_value_at_index(self, index: int, column=0) -> str:
        return self._values[index][self._column_index(column)]

    def get_row_at_index(self, index: int) -> Tuple[str, ...]:
        return self._values[index]

    def get_value_for_index_mod_size(self, index: int, column=0) -> str:
        return self.get_value_at_index(index % self.size, column)

    def pick_random_index(self, weight_set: str, stream: RandomNumberStream) -> int:
        """Draw once from ``stream`` and return the chosen 0-based index."""
        cumulative = self._cumulative[weight_set]
        pick = generate_uniform_random_int(1, int(cumulative[-1]), stream)
        return int(np.searchsorted(cumulative, pick, side="left"))

    def pick_random_value(self, weight_set: str, stream: RandomNumberStream, column=0) -> str:
        return self.get_value_at_index(self.pick_random_index(weight_set, stream), column)

    def __repr__(self) -> str:
        return f"Distribution(name={self.name!r}, size={self.size}, weight_sets={self.weight_sets})"
