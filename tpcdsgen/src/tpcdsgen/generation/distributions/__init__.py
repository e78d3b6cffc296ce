"""Process-wide distribution tables, loaded once and shared read-only."""

from functools import lru_cache
from pathlib import Path
from typing import Iterable

from .base import Distribution
from tpcdsgen.config.logging import get_logger

logger = get_logger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"


@lru_cache(maxsize=None)
def get_distribution(name: str) -> Distribution:
    """
    Load a distribution by name from the packaged data directory.

    Args:
        name: File stem under ``data/`` (e.g. ``"first_names"``)

    Returns:
        The shared Distribution instance

    Raises:
        FileNotFoundError: If no resource exists for the name
    """
    path = DATA_DIR / f"{name}.csv"
    if not path.exists():
        raise FileNotFoundError(f"Distribution file not found: {path}")
    distribution = Distribution.from_csv(name, path)
    logger.debug(f"Loaded distribution '{name}' with {distribution.size} entries")
    return distribution


def available_distributions() -> Iterable[str]:
    return sorted(p.stem for p in DATA_DIR.glob("*.csv"))


def preload_distributions() -> None:
    """Load every distribution up front, before worker threads start."""
    for name in available_distributions():
        get_distribution(name)


__all__ = ["Distribution", "get_distribution", "available_distributions", "preload_distributions"]
