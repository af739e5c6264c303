"""Runtime configuration for liftlog."""

import logging
import os
from pathlib import Path

# Default data directory (project root / data)
DEFAULT_DATA_DIR = Path(__file__).parent.parent.parent / "data"

DATA_DIR_ENV = "LIFTLOG_DATA_DIR"
LOG_LEVEL_ENV = "LIFTLOG_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_data_dir() -> Path:
    """Get the data directory, honoring the LIFTLOG_DATA_DIR override."""
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return DEFAULT_DATA_DIR


def configure_logging(verbose: bool = False) -> None:
    """Install a basic log handler.

    `verbose` forces DEBUG; otherwise LIFTLOG_LOG_LEVEL (default WARNING).
    """
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
        level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
