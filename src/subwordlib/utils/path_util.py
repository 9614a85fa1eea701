## Path Utilities for subwordlib
# subwordlib/src/subwordlib/utils/path_util.py

from pathlib import Path
import os
from .config_util import _meta


def get_global_datasets_dir() -> Path:
    """
    Return the base directory where all datasets are stored.

    Priority:
    1. $GLOBAL_DATASETS_DIR
    2. Fallback: ~/datasets
    """
    env_root = os.environ.get("GLOBAL_DATASETS_DIR")
    if env_root:
        return Path(env_root).expanduser()
    return Path.home() / "datasets"


def get_data_dir(project_config: dict) -> Path:
    """
    Base directory for this project's corpus.

    Uses:
    - GLOBAL_DATASETS_DIR as root
    - project_metadata["data_path"] as subfolder (e.g. "corpora/little_women")

    An absolute data_path is used as-is.
    """
    base = get_global_datasets_dir()
    meta = _meta(project_config)
    sub = meta.get("data_path", "")
    if sub:
        return base / sub
    return base


def get_data_file_path(project_config: dict) -> Path:
    """
    Full path to the corpus file defined in project_metadata["data_file"],
    inside the data directory.
    """
    meta = _meta(project_config)
    if "data_file" not in meta:
        raise KeyError("project_metadata must contain 'data_file'")

    full_path = get_data_dir(project_config) / meta["data_file"]

    if not full_path.exists():
        raise FileNotFoundError(f"Data file not found at: {full_path}")

    return full_path


def short_path(p: Path, base: Path) -> str:
    try:
        return str(p.relative_to(base))
    except ValueError:
        return str(p)
