#!/usr/bin/env python3
"""
Train a subword vocabulary from a corpus, then encode and decode a sentence.

Usage examples:

# Train on ./corpus.txt with a target vocab size of 1000
python -m subwordlib.cli.train_tokenizer_cli

# Explicit corpus, smaller vocabulary, custom sentence
python -m subwordlib.cli.train_tokenizer_cli --corpus data/corpus.txt -v 50 --text "hello there"

# Corpus + vocab size from a project config
python -m subwordlib.cli.train_tokenizer_cli --config /path/to/project_config.json --stats

"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional

from subwordlib.data.corpus_stats import corpus_statistics, summarize_lengths, token_length_stats
from subwordlib.tokenization.training.unigram_training import train_from_config
from subwordlib.utils.config_util import _meta, _tokenizer_cfg, load_config_file, resolve_vocab_size
from subwordlib.utils.logger import get_logger, set_verbosity
from subwordlib.utils.path_util import short_path

logger = get_logger(__name__)

DEFAULT_CORPUS = Path("corpus.txt")
DEFAULT_VOCAB_SIZE = 1000
DEFAULT_TEXT = (
    "Merry Christmas, Marmee! Many of them! Thank you for our books; "
    "we read some, and mean to every day, they cried, in chorus."
)


def parse_args(argv: Optional[list[str]] = None):
    p = argparse.ArgumentParser(description="Train a subword vocabulary and run encode/decode on a sentence.")
    p.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to a project config JSON (corpus location and tokenizer_config.vocab_size).",
    )
    p.add_argument(
        "--corpus",
        type=Path,
        default=None,
        help="Corpus text file, one line per corpus line (default: ./corpus.txt, overrides config).",
    )
    p.add_argument(
        "--vocab-size",
        "-v",
        type=int,
        default=None,
        help=f"Target vocabulary size including <unk> (default: config value or {DEFAULT_VOCAB_SIZE}).",
    )
    p.add_argument(
        "--text",
        "-t",
        type=str,
        default=DEFAULT_TEXT,
        help="Sentence to encode and decode after training.",
    )
    p.add_argument(
        "--show-vocab",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Print the trained vocabulary.",
    )
    p.add_argument(
        "--stats",
        action="store_true",
        help="Print corpus and token length statistics.",
    )
    p.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return p.parse_args(argv)


def _build_config(args) -> dict:
    if args.config is not None:
        cfg = load_config_file(args.config)
        logger.info(f"Project config loaded from: {args.config.resolve()}")
    else:
        cfg = {}

    if args.config is None and args.corpus is None:
        args.corpus = DEFAULT_CORPUS

    if args.vocab_size is None and "vocab_size" not in _tokenizer_cfg(cfg):
        args.vocab_size = DEFAULT_VOCAB_SIZE
    args.vocab_size = resolve_vocab_size(cfg, args.vocab_size)
    _meta(cfg)  # raises on a malformed project_metadata section
    return cfg


def print_vocabulary(vocabulary) -> None:
    print(f"Trained Vocabulary ({len(vocabulary)} pieces):")
    for sw in vocabulary:
        print(f"  {sw.id:>5}  {sw.probability:.6f}  {sw.piece!r}")


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    set_verbosity(args.verbose)

    try:
        cfg = _build_config(args)
    except (OSError, ValueError) as e:
        logger.error(f"Could not load project config: {e}")
        return 2

    try:
        tokenizer, corpus_path, lines = train_from_config(
            cfg,
            vocab_size=args.vocab_size,
            corpus_path=args.corpus,
        )
    except (OSError, KeyError) as e:
        logger.error(f"Could not load corpus: {e}")
        return 2
    except ValueError as e:
        logger.error(f"Tokenizer training failed: {e}")
        return 3

    logger.info(f"Corpus: {short_path(corpus_path.resolve(), Path.cwd())}")

    if args.show_vocab:
        print_vocabulary(tokenizer.vocabulary)

    try:
        encoded = tokenizer.encode(args.text)
    except ValueError as e:
        logger.error(f"Encoding failed: {e}")
        return 3
    print("Encoded:", encoded)

    decoded = tokenizer.decode(encoded)
    print("Decoded:", decoded)

    if args.stats:
        stats = corpus_statistics(lines)
        lengths = summarize_lengths(token_length_stats(tokenizer, lines))
        print(
            f"Corpus: lines {stats['lines']}, chars {stats['chars']}, "
            f"words {stats['words']}, distinct words {stats['distinct_words']}"
        )
        print(
            f"Tokens per line: mean {lengths['mean']:.1f}, median {lengths['median']:.1f}, "
            f"p95 {lengths['p95']:.1f}, max {lengths['max']:.0f}"
        )

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
