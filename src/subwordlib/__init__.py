# src/subwordlib/__init__.py

# Data model
from .vocabulary import Subword, Vocabulary, UNK_TOKEN

# Training + tokenization
from .tokenization.unigram_trainer import train_unigram_vocabulary
from .tokenization.subword_tokenizer import (
    SubwordTokenizer,
    MissingUnknownTokenError,
    encode,
    decode,
)

# train(corpus, vocab_size) / encode(text, vocab) / decode(ids, vocab)
train = train_unigram_vocabulary

__all__ = [
    # Data model
    "Subword",
    "Vocabulary",
    "UNK_TOKEN",

    # Training
    "train",
    "train_unigram_vocabulary",

    # Tokenizer
    "SubwordTokenizer",
    "MissingUnknownTokenError",
    "encode",
    "decode",
]
