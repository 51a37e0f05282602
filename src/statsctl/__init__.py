"""statsctl - quick statistical analysis of CSV/TSV data."""

import logging

from ._version import __version__
from .core.settings import get_settings
from .models import Dataset
from .services.io_operations import load_dataset_from_content, load_dataset_from_file

logging.getLogger("statsctl").setLevel(get_settings().log_level.upper())

__all__ = [
    "Dataset",
    "__version__",
    "load_dataset_from_content",
    "load_dataset_from_file",
]
