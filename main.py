"""
Big Bag Of Words - Wikipedia Movies demo

    python main.py                 # download dataset with kagglehub
    python main.py a.csv b.csv     # use local CSV files (title + plot columns)
"""

import logging
import sys

import pandas as pd

from bbow import Bag
from bbow.corpus import bag_from_frame, bags_per_row
from bbow.dataset import download_wikipedia_movies_dataset, find_csv_files

log = logging.getLogger(__name__)

COLUMNS = ["title", "plot"]


def load_movies(paths):
    dataframes = []
    for p in paths:
        df = pd.read_csv(p)
        df["source"] = p
        dataframes.append(df)
        print(f"  ✓ Loaded {len(df)} movies from {p}")
    return pd.concat(dataframes, ignore_index=True)


def main(argv):
    print("=" * 80)
    print("Big Bag Of Words - Wikipedia Movies")
    print("=" * 80)

    print("\n[1/4] Loading datasets...")
    paths = argv or find_csv_files(download_wikipedia_movies_dataset())
    if not paths:
        log.error("No CSV files found")
        return 1
    all_movies = load_movies(paths)
    print(f"\nTotal movies loaded: {len(all_movies)}")

    print("\n[2/4] Building corpus bag...")
    bag = bag_from_frame(all_movies, COLUMNS, Bag())
    print(f"  ✓ Unique words: {len(bag):,}")
    print(f"  ✓ Total words: {bag.count():,}")

    print("\nTop 20 most frequent words:")
    for word, count in bag.most_common(20):
        print(f"  {word:20s} : {count:6,} occurrences")

    print("\n[3/4] Per-document bags...")
    docs = bags_per_row(all_movies, COLUMNS)
    sizes = docs.apply(len)
    print(f"  - Mean: {sizes.mean():.1f} unique words")
    print(f"  - Median: {sizes.median():.1f} unique words")
    print(f"  - Min: {sizes.min()} unique words")
    print(f"  - Max: {sizes.max()} unique words")

    print("\n[4/4] Example entries:")
    print("-" * 80)
    for term in ["love", "kill", "friend", "family", "death"]:
        df_ = int(docs.apply(lambda b: term in b).sum())
        print(f"  {term:10s} occurrences={bag.match_count(term):6,}  documents={df_:,}")

    print("\n" + "=" * 80)
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    sys.exit(main(sys.argv[1:]))
