"""
Command line entry point: print lorem ipsum text.

    lipsum 40
    lipsum 12 --mode words --seed 7
    lipsum 30 --train notes.txt --order 3
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, List, Optional

from lipsum.config import settings
from lipsum.services.generator import lipsum, lipsum_title, lipsum_words, make_rng
from lipsum.services.markov import LipsumError, MarkovChain
from lipsum.utils.logger import setup_logger

logger = setup_logger(__name__)

DEFAULT_WORDS = 25


def parse_count(value: Optional[str]) -> int:
    """Word count from the command line; anything unparsable means 25."""
    try:
        n = int(value) if value is not None else DEFAULT_WORDS
    except ValueError:
        return DEFAULT_WORDS
    return n if n >= 0 else DEFAULT_WORDS


def train_files(paths: List[str], order: int) -> MarkovChain:
    chain = MarkovChain(order)
    for path in paths:
        chain.train(Path(path).read_text(encoding="utf-8"))
    logger.debug(f"[LIPSUM] Trained on {len(paths)} file(s): {chain.size()} keys")
    return chain


def main(argv: Any = None) -> int:
    parser = argparse.ArgumentParser(prog="lipsum", description="Generate lorem ipsum text.")
    parser.add_argument("words", nargs="?", default=None, help=f"Number of words (default {DEFAULT_WORDS})")
    parser.add_argument("--mode", choices=["text", "words", "title"], default="text", help="Output style")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible output")
    parser.add_argument("--train", action="append", default=[], metavar="FILE", help="Train on FILE instead of the bundled texts")
    parser.add_argument("--order", type=int, default=settings.CHAIN_ORDER, help="Chain order used with --train")

    args = parser.parse_args(argv)
    n = parse_count(args.words)
    rng = make_rng(args.seed)

    try:
        chain = train_files(args.train, args.order) if args.train else None
        if args.mode == "title":
            text = lipsum_title(rng, chain)
        elif args.mode == "words":
            text = lipsum_words(n, rng, chain)
        elif chain is not None:
            text = chain.generate(n, rng)
        else:
            text = lipsum(n, rng)
    except (OSError, UnicodeDecodeError, LipsumError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
