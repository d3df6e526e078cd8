from __future__ import annotations

from helperkit import execution, files, logger

__version__ = "1.0.0"

__all__ = ["execution", "files", "logger", "__version__"]
