"""Version information for statsctl."""

from __future__ import annotations

import importlib.metadata

try:
    __version__ = importlib.metadata.version("statsctl")
except importlib.metadata.PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.3.0-dev"
