## subwordlib/src/subwordlib/tokenization/unigram_trainer.py
from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Tuple

from subwordlib.vocabulary import UNK_PROBABILITY, UNK_TOKEN, Vocabulary

WORD_DELIMITER = " "


def count_words(corpus: Iterable[str]) -> Counter:
    """
    Count words across the corpus.

    Lines are split on the single space character only, so tabs and other
    whitespace stay inside words. Empty strings (blank lines, repeated
    spaces) are not words.
    """
    counts: Counter = Counter()
    for line in corpus:
        for word in line.split(WORD_DELIMITER):
            if word:
                counts[word] += 1
    return counts


def train_unigram_vocabulary(corpus: Iterable[str], vocab_size: int) -> Vocabulary:
    """
    Build a subword vocabulary by repeatedly merging the two least probable pieces.

    - Start from one piece per distinct word, weighted by relative frequency.
    - While more than vocab_size - 1 pieces remain (one slot is kept for
      "<unk>"), merge the two lowest-probability pieces: the text is
      lowest + second, the probability is their mean.
    - Append "<unk>" and number the pieces by position.

    Probabilities are not renormalized after a merge, so their sum drifts
    away from 1.0. Ties keep the current working order (stable sort), which
    starts as first-occurrence order of the words and puts each merged
    piece at the end.
    """
    vocab_size = max(vocab_size, 1)

    counts = count_words(corpus)
    total = sum(counts.values())

    # 1) Word-level pieces with normalized probabilities
    pieces: List[Tuple[str, float]] = [
        (word, count / total) for word, count in counts.items()
    ]

    # 2) Merge least probable pieces until the target is reached
    while len(pieces) > vocab_size - 1 and len(pieces) >= 2:
        pieces.sort(key=lambda p: p[1])
        (low_piece, low_prob), (next_piece, next_prob) = pieces[0], pieces[1]
        merged = (low_piece + next_piece, (low_prob + next_prob) / 2)
        pieces = pieces[2:] + [merged]

    # 3) Fallback token, always last
    pieces.append((UNK_TOKEN, UNK_PROBABILITY))

    return Vocabulary.from_pieces(pieces)
