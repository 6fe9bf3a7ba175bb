"""
Lorem ipsum text generator built on a word-level Markov chain.
"""

from lipsum.services.generator import lipsum, lipsum_title, lipsum_words
from lipsum.services.markov import (
    ChainOrderError,
    EmptyChainError,
    LipsumError,
    MarkovChain,
    Sampler,
)

__version__ = "0.1.0"

__all__ = [
    "ChainOrderError",
    "EmptyChainError",
    "LipsumError",
    "MarkovChain",
    "Sampler",
    "lipsum",
    "lipsum_title",
    "lipsum_words",
]
