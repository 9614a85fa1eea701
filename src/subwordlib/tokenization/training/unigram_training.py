## subwordlib/tokenization/training/unigram_training.py
from __future__ import annotations
from pathlib import Path
from typing import List, Optional, Tuple

from subwordlib.tokenization.subword_tokenizer import SubwordTokenizer
from subwordlib.utils.config_util import resolve_vocab_size
from subwordlib.utils.path_util import get_data_file_path
from subwordlib.utils.logger import get_logger

logger = get_logger(__name__)


class CorpusLoadError(OSError):
    """Raised when a corpus file exists but cannot be read as text."""


def read_corpus(path: Path | str) -> List[str]:
    """
    Read a corpus file fully into memory, one entry per line.

    Only line terminators are removed; blank lines and surrounding
    whitespace are kept as they are.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Corpus file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except UnicodeDecodeError as e:
        raise CorpusLoadError(f"Corpus file is not valid UTF-8: {path} ({e})") from e
    logger.debug(f"Read {len(lines)} lines from {path}")
    return lines


def train_from_config(
    project_config: dict,
    *,
    vocab_size: Optional[int] = None,
    corpus_path: Optional[Path] = None,
) -> Tuple[SubwordTokenizer, Path, List[str]]:
    """
    Train a subword tokenizer on the corpus defined in a project config.

    Parameters
    ----------
    project_config : dict
        Project config with project_metadata (data_path, data_file) and,
        optionally, tokenizer_config (vocab_size).
    vocab_size : Optional[int]
        Target vocabulary size including "<unk>". Overrides the config.
    corpus_path : Optional[Path]
        Explicit corpus file. Overrides project_metadata.

    Returns
    -------
    SubwordTokenizer, Path, List[str]
        The trained tokenizer, the corpus file and the lines read from it
        (so callers never read the corpus twice).
    """
    vocab_size = resolve_vocab_size(project_config, vocab_size)

    if corpus_path is None:
        corpus_path = get_data_file_path(project_config)
    corpus_path = Path(corpus_path)

    texts = read_corpus(corpus_path)
    logger.info(f"Training on {corpus_path} ({len(texts)} lines), target vocab size {vocab_size}")

    tokenizer = SubwordTokenizer.train(texts, vocab_size=vocab_size)
    logger.info(f"Trained vocabulary with {tokenizer.vocab_size} pieces (unk id {tokenizer.unk_id})")

    return tokenizer, corpus_path, texts
