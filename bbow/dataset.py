"""
Download the Wikipedia Movies dataset from Kaggle using kagglehub.
"""
import os
import logging
from typing import List

import kagglehub

log = logging.getLogger(__name__)

DATASET = "exactful/wikipedia-movies"


def download_wikipedia_movies_dataset() -> str:
    """Download the latest version of the dataset; returns its local path."""
    log.info("Downloading '%s' dataset from Kaggle...", DATASET)
    path = kagglehub.dataset_download(DATASET)
    log.info("Dataset path: %s", path)
    return path


def find_csv_files(path: str) -> List[str]:
    """All CSV files below `path`, sorted."""
    found = []
    for root, _dirs, filenames in os.walk(path):
        for filename in filenames:
            if filename.endswith(".csv"):
                full_path = os.path.join(root, filename)
                size = os.path.getsize(full_path) / (1024 * 1024)  # MB
                log.info("  - %s (%.1f MB)", full_path, size)
                found.append(full_path)
    return sorted(found)
