## Configuration Utilities for subwordlib
# subwordlib/src/subwordlib/utils/config_util.py

import json
from pathlib import Path


def _section(cfg: dict, key: str, default: dict) -> dict:
    section = cfg.get(key, default)
    if not isinstance(section, dict):
        raise ValueError(f"'{key}' must be a JSON object, got: {section!r}")
    return section


def _meta(cfg: dict) -> dict:
    """Return project_metadata sub-dict if present, otherwise the whole dict."""
    return _section(cfg, "project_metadata", cfg)


def _tokenizer_cfg(cfg: dict) -> dict:
    """Return tokenizer_config sub-dict if present, otherwise an empty dict."""
    return _section(cfg, "tokenizer_config", {})


def load_config_file(config_path: Path | str) -> dict:
    """Load a JSON config from an explicit path."""
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config not found at: {config_path}")

    with config_path.open("r", encoding="utf-8") as f:
        cfg = json.load(f)

    if not isinstance(cfg, dict):
        raise ValueError(f"Config at {config_path} must be a JSON object")
    return cfg


def load_config(caller_file: str, config_filename: str = "project_config.json") -> dict:
    """
    Load a configuration file located in the same directory as the caller.
    The filename is flexible (default: project_config.json).
    """
    project_dir = Path(caller_file).resolve().parent
    return load_config_file(project_dir / config_filename)


def resolve_vocab_size(cfg: dict, vocab_size: int | None = None) -> int:
    """
    Pick the target vocabulary size: explicit argument first, then
    tokenizer_config["vocab_size"].
    """
    if vocab_size is None:
        vocab_size = _tokenizer_cfg(cfg).get("vocab_size")
    if vocab_size is None:
        raise ValueError(
            "vocab_size must be provided either as arg or in "
            "project_config['tokenizer_config']['vocab_size']"
        )
    if isinstance(vocab_size, bool) or not isinstance(vocab_size, int):
        raise ValueError(f"vocab_size must be an integer, got: {vocab_size!r}")
    return vocab_size
