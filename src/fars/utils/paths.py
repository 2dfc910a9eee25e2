"""Data-directory resolution for FARS accident files."""

import logging
import os
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

DATA_DIR_ENV = "FARS_DATA_DIR"

PathLike = Union[str, "os.PathLike[str]"]


def resolve_data_dir(data_dir: Optional[PathLike] = None) -> Path:
    """Resolve the directory holding ``accident_<year>.csv.bz2`` files.

    Precedence: explicit *data_dir* > ``FARS_DATA_DIR`` > current directory.
    A directory that does not exist is still returned (with a warning) so
    the per-file "does not exist" errors surface where they belong.

    Args:
        data_dir: Optional explicit directory.

    Returns:
        Path to the data directory.
    """
    if data_dir is not None:
        resolved = Path(data_dir)
    elif os.environ.get(DATA_DIR_ENV):
        resolved = Path(os.environ[DATA_DIR_ENV])
    else:
        return Path.cwd()

    if not resolved.is_dir():
        logger.warning(
            f"Data directory '{resolved}' does not exist.",
            extra={"data_dir": str(resolved)},
        )
    return resolved
