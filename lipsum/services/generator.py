"""
Lorem ipsum facade over the reference Markov chain.

`lipsum` reproduces the classical paragraph word for word and only turns
random once the paragraph runs out; `lipsum_words` and `lipsum_title`
sample from a random sentence start and format the result.
"""
from __future__ import annotations

import logging
import random
import string
import threading
from typing import Iterable, List, Optional

from lipsum.config import settings

from .corpus import LIBER_PRIMUS, LOREM_IPSUM
from .markov import Chooser, LipsumError, MarkovChain, start_from, start_randomly
from .tokenizer import SENTENCE_END, ends_sentence, tokenize

logger = logging.getLogger(__name__)

# Short Latin words kept lowercase inside a title.
TITLE_MINOR_WORDS = frozenset(
    {"a", "ab", "ac", "ad", "at", "cum", "de", "e", "et", "ex", "in", "ne", "per", "pro", "qui", "quo", "sed", "ut"}
)
TITLE_MIN_WORDS = 3
TITLE_MAX_WORDS = 7
# Pulls allowed per title word before giving up on a punctuation-only chain.
TITLE_PULLS_PER_WORD = 10


# Singleton instance
_LOREM_CHAIN: Optional[MarkovChain] = None
_LOREM_CHAIN_LOCK = threading.Lock()


def get_lorem_chain() -> MarkovChain:
    """Get or create the chain trained on the bundled Latin texts."""
    global _LOREM_CHAIN
    if _LOREM_CHAIN is None:
        with _LOREM_CHAIN_LOCK:
            if _LOREM_CHAIN is None:
                chain = MarkovChain(order=settings.CHAIN_ORDER)
                chain.train(LOREM_IPSUM)
                chain.train(LIBER_PRIMUS)
                logger.info(f"[LIPSUM] Reference chain ready: {chain.size()} keys (order {chain.order})")
                _LOREM_CHAIN = chain
    return _LOREM_CHAIN


def lipsum(n: int, rng: Optional[Chooser] = None) -> str:
    """
    Generate `n` words of lorem ipsum text.

    The output starts with "Lorem ipsum" and follows the classical
    paragraph; longer requests continue with chain output.

    Args:
        n: Number of words
        rng: Random source for the continuation

    Returns:
        Words joined by single spaces
    """
    if n <= 0:
        return ""
    prefix = tokenize(LOREM_IPSUM)
    if n <= len(prefix):
        return " ".join(prefix[:n])

    chain = get_lorem_chain()
    sampler = start_from(chain, prefix, rng)
    if sampler.key == tuple(prefix[-chain.order :]):
        sampler.take(chain.order)
    return " ".join(prefix + sampler.take(n - len(prefix)))


def lipsum_words(n: int, rng: Optional[Chooser] = None, chain: Optional[MarkovChain] = None) -> str:
    """Generate `n` random words formatted as sentences (reference chain unless given)."""
    if n <= 0:
        return ""
    return join_words(start_randomly(chain if chain is not None else get_lorem_chain(), rng).take(n))


def lipsum_title(rng: Optional[Chooser] = None, chain: Optional[MarkovChain] = None) -> str:
    """
    Generate a short title-cased phrase without punctuation.

    Raises:
        LipsumError: if the chain yields no word characters at all
    """
    sampler = start_randomly(chain if chain is not None else get_lorem_chain(), rng)
    count = TITLE_MIN_WORDS + sampler.rng.choice(range(TITLE_MAX_WORDS - TITLE_MIN_WORDS + 1))

    words: List[str] = []
    for _ in range(count * TITLE_PULLS_PER_WORD):
        if len(words) == count:
            break
        word = sampler.next().strip(string.punctuation)
        if not word:
            continue
        if words and word.lower() in TITLE_MINOR_WORDS:
            words.append(word.lower())
        else:
            words.append(capitalize(word))

    if not words:
        raise LipsumError("chain has no word tokens to build a title from")
    return " ".join(words)


def capitalize(word: str) -> str:
    """Uppercase the first character, leave the rest as is."""
    return word[:1].upper() + word[1:]


def join_words(words: Iterable[str]) -> str:
    """
    Join words into prose.

    The first word and every word after a sentence end are capitalized,
    and the text always closes with a sentence end.
    """
    out: List[str] = []
    start = True
    for word in words:
        out.append(capitalize(word) if start else word)
        start = ends_sentence(word)

    if not out:
        return ""
    if not ends_sentence(out[-1]):
        last = out[-1].rstrip(string.punctuation) or out[-1]
        out[-1] = last + SENTENCE_END[0]
    return " ".join(out)


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Random source seeded by `seed`, else settings.RANDOM_SEED, else the OS."""
    if seed is None:
        seed = settings.RANDOM_SEED
    return random.Random(seed)
