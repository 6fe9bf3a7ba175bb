"""
Markov chain text generator (CPU-only).

Keys are windows of `order` consecutive tokens (default 2); each key maps to
every token observed right after it, duplicates included, so a uniform pick
from the follower list is a frequency-weighted pick.
Training: from raw text or token lists; generation: lazy, never-ending
iterator with an injected random source.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Protocol, Sequence, Tuple, Union

from .tokenizer import is_capitalized, tokenize

logger = logging.getLogger(__name__)

Key = Tuple[str, ...]


class Chooser(Protocol):
    """Random source: uniform pick of one item from a non-empty sequence."""

    def choice(self, seq: Sequence): ...


class LipsumError(Exception):
    """Base class for lipsum errors."""


class ChainOrderError(LipsumError, ValueError):
    """Chain order is not a positive integer."""


class EmptyChainError(LipsumError, LookupError):
    """A start position was requested from a chain with no training data."""


@dataclass(frozen=True)
class ChainStats:
    """Statistics for a trained chain."""
    order: int
    keys: int
    transitions: int
    unique_tokens: int
    sentence_starts: int


class MarkovChain:
    """
    Word-level Markov chain.

    Supports:
    - Any order >= 1 (default 2)
    - Repeated training; observations accumulate
    - Random or seeded start positions
    - Configurable sentence-start predicate
    """

    def __init__(
        self,
        order: int = 2,
        is_sentence_start: Optional[Callable[[str], bool]] = None,
    ):
        """
        Initialize an empty chain.

        Args:
            order: Number of preceding tokens used as the lookup key
            is_sentence_start: Predicate on a key's first token deciding
                whether the key is a plausible place to start generating
        """
        if isinstance(order, bool) or not isinstance(order, int) or order < 1:
            raise ChainOrderError(f"chain order must be a positive integer, got {order!r}")
        self.order = order
        self.is_sentence_start = is_sentence_start or is_capitalized
        self.transitions: Dict[Key, List[str]] = {}
        self._keys_cache: Optional[List[Key]] = None
        self._starts_cache: Optional[List[Key]] = None

    def train(self, tokens: Union[str, Iterable[str]]) -> "MarkovChain":
        """
        Record every (key -> next token) observation in the sequence.

        Args:
            tokens: Token sequence, or raw text which is tokenized first

        Returns:
            The chain itself
        """
        if isinstance(tokens, str):
            tokens = tokenize(tokens)
        else:
            tokens = list(tokens)
        if len(tokens) <= self.order:
            return self

        for i in range(len(tokens) - self.order):
            key = tuple(tokens[i : i + self.order])
            self.transitions.setdefault(key, []).append(tokens[i + self.order])

        # Invalidate cache after training
        self._keys_cache = None
        self._starts_cache = None
        logger.debug(f"[MARKOV] Trained on {len(tokens)} tokens, {len(self.transitions)} keys")
        return self

    learn = train

    def followers(self, key: Sequence[str]) -> Tuple[str, ...]:
        """
        Get the tokens observed after a key.

        Returns an empty tuple for an unseen key.
        """
        return tuple(self.transitions.get(tuple(key), ()))

    def is_empty(self) -> bool:
        return not self.transitions

    def size(self) -> int:
        """Number of distinct keys."""
        return len(self.transitions)

    def __len__(self) -> int:
        return len(self.transitions)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, tuple) and key in self.transitions

    def keys(self) -> List[Key]:
        """All keys in first-observation order."""
        if self._keys_cache is None:
            self._keys_cache = list(self.transitions)
        return self._keys_cache

    def sentence_starts(self) -> List[Key]:
        """Keys whose first token looks like the start of a sentence."""
        if self._starts_cache is None:
            self._starts_cache = [k for k in self.keys() if self.is_sentence_start(k[0])]
        return self._starts_cache

    def random_key(self, rng: Chooser) -> Key:
        """
        Pick a starting key, preferring sentence starts.

        Raises:
            EmptyChainError: if the chain has no keys
        """
        if not self.transitions:
            raise EmptyChainError("chain has no training data")
        candidates = self.sentence_starts() or self.keys()
        return rng.choice(candidates)

    def start_randomly(self, rng: Optional[Chooser] = None) -> "Sampler":
        return start_randomly(self, rng)

    def start_from(self, seed: Union[str, Sequence[str]], rng: Optional[Chooser] = None) -> "Sampler":
        return start_from(self, seed, rng)

    iter = start_randomly
    iter_from = start_from

    def generate(self, n: int, rng: Optional[Chooser] = None) -> str:
        """Generate `n` words starting from a random point in the chain."""
        if n <= 0:
            return ""
        return " ".join(self.start_randomly(rng).take(n))

    def generate_from(self, n: int, seed: Union[str, Sequence[str]], rng: Optional[Chooser] = None) -> str:
        """Generate `n` words starting from the key at the end of `seed`."""
        if n <= 0:
            return ""
        return " ".join(self.start_from(seed, rng).take(n))

    def stats(self) -> ChainStats:
        """Get statistics about the chain."""
        vocab = set()
        transitions = 0
        for key, followers in self.transitions.items():
            vocab.update(key)
            vocab.update(followers)
            transitions += len(followers)
        return ChainStats(
            order=self.order,
            keys=len(self.transitions),
            transitions=transitions,
            unique_tokens=len(vocab),
            sentence_starts=len(self.sentence_starts()),
        )


class Sampler:
    """
    Never-ending iterator over the words of a chain.

    Each pull emits the first token of the current key and slides the
    window by one drawn follower. A key with no followers (dead end)
    still emits its first token, then re-seeds the walk at a random start
    key. The chain is only read.
    """

    def __init__(self, chain: MarkovChain, rng: Chooser, key: Key):
        self.chain = chain
        self.rng = rng
        self._key = key
        self.reseeds = 0

    @property
    def key(self) -> Key:
        """Current window."""
        return self._key

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        word = self._key[0]
        followers = self.chain.transitions.get(self._key)
        if not followers:
            # The new key is emitted from the next pull on.
            self._key = self.chain.random_key(self.rng)
            self.reseeds += 1
            logger.debug(f"[MARKOV] Dead end after {word!r}, re-seeded at {self._key!r}")
            return word

        self._key = self._key[1:] + (self.rng.choice(followers),)
        return word

    next = __next__

    def take(self, n: int) -> List[str]:
        """Pull the next `n` tokens."""
        return [next(self) for _ in range(max(0, n))]


def start_randomly(chain: MarkovChain, rng: Optional[Chooser] = None) -> Sampler:
    """
    Start a sampler at a random sentence start (or any key).

    Raises:
        EmptyChainError: if the chain has no training data
    """
    rng = rng if rng is not None else random.Random()
    return Sampler(chain, rng, chain.random_key(rng))


def start_from(
    chain: MarkovChain,
    seed: Union[str, Sequence[str]],
    rng: Optional[Chooser] = None,
) -> Sampler:
    """
    Start a sampler at the key formed by the last `order` seed tokens.

    Falls back to a random start when that key was never observed.

    Raises:
        EmptyChainError: if the chain has no training data
    """
    rng = rng if rng is not None else random.Random()
    tokens = tokenize(seed) if isinstance(seed, str) else list(seed)
    if chain.is_empty():
        raise EmptyChainError("chain has no training data")
    key = tuple(tokens[-chain.order :])
    if len(key) == chain.order and key in chain.transitions:
        return Sampler(chain, rng, key)
    return start_randomly(chain, rng)


def train_from_corpus(lines: Iterable[str], order: int = 2) -> MarkovChain:
    """Train a chain on each line of a corpus."""
    chain = MarkovChain(order)
    for line in lines:
        chain.train(line)
    return chain
