from typing import Iterable

import numpy as np

from subwordlib.tokenization.unigram_trainer import count_words


def corpus_statistics(lines: Iterable[str]) -> dict[str, int]:
    """
    Compute statistics (lines, characters, words, distinct words) for a corpus.

    Words follow the same rule as training: split on single spaces,
    empty strings ignored.

    Returns:
        e.g. {"lines": 123, "chars": 4567, "words": 890, "distinct_words": 310}
    """
    lines = list(lines)
    counts = count_words(lines)

    return {
        "lines": len(lines),
        "chars": sum(len(l) for l in lines),
        "words": sum(counts.values()),
        "distinct_words": len(counts),
    }


def token_length_stats(tokenizer, lines: Iterable[str]) -> np.ndarray:
    """Token count for every non-empty line."""
    lengths = [len(tokenizer.encode(l)) for l in lines if l]
    return np.array(lengths, dtype=np.int64)


def summarize_lengths(lengths: np.ndarray) -> dict[str, float]:
    if lengths.size == 0:
        return {"mean": 0.0, "median": 0.0, "p95": 0.0, "max": 0.0}

    return {
        "mean": float(np.mean(lengths)),
        "median": float(np.median(lengths)),
        "p95": float(np.percentile(lengths, 95)),
        "max": float(np.max(lengths)),
    }
