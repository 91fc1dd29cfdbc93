"""
Corpus loading: feed documents into bags.

- Folder of text files -> one cumulative bag
- pandas DataFrame columns -> one cumulative bag, or one bag per row
"""

import os
import logging
from typing import Callable, Iterable, Optional, Tuple

import pandas as pd

from .bag import Bag

log = logging.getLogger(__name__)


# --- Common ---
def read_txt(path: str) -> Tuple[str, str]:
    """Read text file: returns (title, content)."""
    with open(path, "r", encoding="utf-8") as f:
        return os.path.basename(path), f.read()


def _row_texts(row, columns: Iterable[str]):
    for col in columns:
        value = row[col]
        if pd.isna(value):
            continue
        yield str(value)


# =============================================================================
# Folder of documents
# =============================================================================
def bag_from_folder(folder: str, bag: Optional[Bag] = None,
                    read_fn: Callable[[str], Tuple[str, str]] = read_txt) -> Bag:
    """Add every file in `folder` (sorted by name) to `bag`."""
    bag = Bag() if bag is None else bag
    docs = 0
    for name in sorted(os.listdir(folder)):
        p = os.path.join(folder, name)
        if os.path.isfile(p):
            _, text = read_fn(p)
            bag.extend_from_text(text)
            docs += 1
    log.info("Read %d documents from %s (%d unique words)", docs, folder, len(bag))
    return bag


# =============================================================================
# pandas DataFrames
# =============================================================================
def bag_from_frame(df: pd.DataFrame, columns: Iterable[str], bag: Optional[Bag] = None) -> Bag:
    """Add the given columns of every row to `bag`. Missing values are skipped."""
    columns = list(columns)
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise KeyError(f"columns not in frame: {missing}")

    bag = Bag() if bag is None else bag
    for _, row in df.iterrows():
        for text in _row_texts(row, columns):
            bag.extend_from_text(text)
    log.info("Bagged %d rows (%d unique words, %d total)", len(df), len(bag), bag.count())
    return bag


def bags_per_row(df: pd.DataFrame, columns: Iterable[str]) -> pd.Series:
    """One bag per row, e.g. per-document features. Indexed like `df`."""
    columns = list(columns)
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise KeyError(f"columns not in frame: {missing}")

    def _bag(row):
        bag = Bag()
        for text in _row_texts(row, columns):
            bag.extend_from_text(text)
        return bag

    return pd.Series([_bag(row) for _, row in df.iterrows()], index=df.index, dtype=object)
