"""
Shared pytest fixtures for chain and generator tests.
"""
import random
from pathlib import Path
from typing import List

import pytest

from lipsum.services.markov import MarkovChain


QUICK_FOX = "The quick brown fox jumps over the lazy dog ."


@pytest.fixture
def quick_fox_chain() -> MarkovChain:
    """Order-2 chain trained on a single pangram."""
    return MarkovChain().train(QUICK_FOX)


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(42)


@pytest.fixture
def sample_corpus() -> List[str]:
    """Sample text corpus for chain training."""
    return [
        "Lorem ipsum dolor sit amet, consectetur adipiscing elit.",
        "Sed do eiusmod tempor incididunt ut labore et dolore magna aliqua.",
        "Ut enim ad minim veniam, quis nostrud exercitation ullamco.",
        "Duis aute irure dolor in reprehenderit in voluptate velit esse.",
        "Excepteur sint occaecat cupidatat non proident.",
    ]


@pytest.fixture
def corpus_path(sample_corpus, tmp_path) -> Path:
    """Temporary text file holding the sample corpus."""
    file_path = tmp_path / "corpus.txt"
    file_path.write_text("\n".join(sample_corpus), encoding="utf-8")
    return file_path
