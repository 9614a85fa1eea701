# subwordlib/src/subwordlib/tokenization/subword_tokenizer.py

from __future__ import annotations

from typing import Dict, Iterable, List

import torch

from subwordlib.vocabulary import UNK_TOKEN, Vocabulary
from subwordlib.tokenization.unigram_trainer import train_unigram_vocabulary

MODEL_TYPE = "unigram"


class MissingUnknownTokenError(ValueError):
    """Raised when encoding needs a fallback but the vocabulary has no <unk>."""


def encode(text: str, vocabulary: Vocabulary) -> List[int]:
    """
    Greedy longest-prefix-match encoding.

    At each position the longest vocabulary piece that prefixes the rest of
    the text is emitted; if nothing matches, the <unk> id is emitted and a
    single character is consumed. Needing that fallback with a vocabulary
    that has no <unk> raises MissingUnknownTokenError.
    """
    unk_id = vocabulary.unk_id

    ids: List[int] = []
    pos = 0
    while pos < len(text):
        match = vocabulary.longest_prefix(text, pos)
        if match is None:
            if unk_id is None:
                raise MissingUnknownTokenError(
                    f"Vocabulary has no '{UNK_TOKEN}' entry; cannot encode {text[pos]!r} at position {pos}"
                )
            ids.append(unk_id)
            pos += 1
        else:
            token_id, length = match
            ids.append(token_id)
            pos += length
    return ids


def decode(token_ids: Iterable[int], vocabulary: Vocabulary) -> str:
    """Concatenate the pieces of known ids; unknown ids are dropped."""
    id_to_piece = vocabulary.id_to_piece
    return "".join(
        id_to_piece[int(i)] for i in token_ids if int(i) in id_to_piece
    )


class SubwordTokenizer:
    """
    Subword tokenizer over a vocabulary learned by least-probable merging.

      - trains from raw text lines
      - encodes with greedy longest match and <unk> fallback
      - decodes by plain concatenation (lossy: whitespace and unknown
        characters are not restored)
    """

    model_type = MODEL_TYPE

    def __init__(self, vocabulary: Vocabulary):
        self.vocabulary = vocabulary

    # -------- TRAINING --------

    @classmethod
    def train(cls, texts: Iterable[str], vocab_size: int) -> "SubwordTokenizer":
        return cls(train_unigram_vocabulary(texts, vocab_size))

    # -------- ENCODE / DECODE --------

    def encode(self, text: str) -> List[int]:
        return encode(text, self.vocabulary)

    def decode(self, ids: Iterable[int]) -> str:
        return decode(ids, self.vocabulary)

    def encode_tensor(self, text: str) -> torch.Tensor:
        """Encode text into a 1-D LongTensor of token ids."""
        return torch.tensor(self.encode(text), dtype=torch.long)

    # -------- VOCAB ACCESS --------

    @property
    def vocab(self) -> Dict[str, int]:
        return self.vocabulary.piece_to_id

    @property
    def id_to_token(self) -> Dict[int, str]:
        return self.vocabulary.id_to_piece

    @property
    def vocab_size(self) -> int:
        return len(self.vocabulary)

    @property
    def unk_id(self):
        return self.vocabulary.unk_id
