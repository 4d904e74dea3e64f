"""
Key sources for the demo, the benchmark and the tests.

Provides reproducible random integer keys, letter keys, shuffled card decks
and, for real data, the values of one column of a CSV dataset.
"""

import random
import string
from typing import Any, Dict, List, Optional

import pandas as pd

import config
from src.common.card import Card, full_deck
from src.common.logger import get_logger

logger = get_logger(__name__)

# Cache for loaded datasets, keyed by (path, column)
_dataset_cache: Dict[tuple, List[Any]] = {}


def get_random_keys(n: int, seed: Optional[int] = None, key_range: Optional[int] = None) -> List[int]:
    """
    Get n distinct random integers in shuffled order.

    Args:
        n: Number of keys.
        seed: Random seed for reproducibility. If None, results vary.
        key_range: Keys are drawn from [0, key_range). Defaults to 10 * n.

    Returns:
        List of n distinct integers.

    Raises:
        ValueError: If the range cannot supply n distinct keys.
    """
    if n < 0:
        raise ValueError(f"Cannot generate {n} keys")
    key_range = key_range if key_range is not None else max(10 * n, 1)
    if n > key_range:
        raise ValueError(f"Cannot draw {n} distinct keys from a range of {key_range}")

    rng = random.Random(seed)
    return rng.sample(range(key_range), n)


def get_random_draws(n: int, seed: Optional[int] = None, key_range: int = 200) -> List[int]:
    """
    Get n random integers in [0, key_range), repeats allowed.

    Used to exercise duplicate rejection and misses on removal.
    """
    rng = random.Random(seed)
    return [rng.randrange(key_range) for _ in range(n)]


def get_letter_keys(n: int) -> List[str]:
    """Get the first n upper-case letters, in order."""
    if not 0 <= n <= len(string.ascii_uppercase):
        raise ValueError(f"Only {len(string.ascii_uppercase)} letters available, requested {n}")
    return list(string.ascii_uppercase[:n])


def get_shuffled_deck(seed: Optional[int] = None) -> List[Card]:
    """Get a full 52-card deck in random order."""
    deck = full_deck()
    random.Random(seed).shuffle(deck)
    return deck


def load_keys_from_csv(
    path: Optional[str] = None,
    column: Optional[str] = None,
    force_reload: bool = False
) -> List[Any]:
    """
    Load the distinct values of one CSV column as tree keys.

    Null values are dropped and duplicates keep their first occurrence.
    Results are cached in memory after the first load.

    Args:
        path: CSV file path. If None, uses config.DATASET_PATH.
        column: Column to read. If None, uses config.DATASET_KEY_COLUMN.
        force_reload: If True, reload from disk even if cached.

    Returns:
        List of key values in file order.

    Raises:
        FileNotFoundError: If the dataset file does not exist.
        KeyError: If the column is missing from the file.
    """
    path = path or config.DATASET_PATH
    column = column or config.DATASET_KEY_COLUMN
    cache_key = (path, column)

    if cache_key in _dataset_cache and not force_reload:
        logger.debug(f"Returning cached keys for {path}:{column}")
        return _dataset_cache[cache_key]

    logger.info(f"Loading keys from {path} (column '{column}')")

    df = pd.read_csv(path, low_memory=False)
    if column not in df.columns:
        raise KeyError(f"Column '{column}' not found in {path}")

    series = df[column]
    null_count = series.isnull().sum()
    if null_count > 0:
        logger.warning(f"Filtering out {null_count} rows with null keys")
        series = series[series.notnull()]

    duplicate_count = series.duplicated().sum()
    if duplicate_count > 0:
        logger.warning(f"Dropping {duplicate_count} duplicate keys")
        series = series.drop_duplicates()

    keys = series.tolist()
    logger.info(f"Loaded {len(keys):,} keys")

    _dataset_cache[cache_key] = keys
    return keys


def clear_cache() -> None:
    """Clear the cached datasets to free memory."""
    _dataset_cache.clear()
    logger.info("Dataset cache cleared")
