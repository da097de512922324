import os
from typing import Optional

DEFAULT_ENV_FILE = ".env"
DEFAULT_DIST_FILE = ".env.dist"


def resolve_file_path(directory: str, filename: Optional[str] = None, default: str = DEFAULT_ENV_FILE) -> str:
    """
    Join directory and filename into a normalized absolute path.
    An empty or missing filename falls back to `default`. Existence is not checked.
    """
    if not filename:
        filename = default
    directory = directory.rstrip(os.sep) or os.sep
    return os.path.abspath(os.path.normpath(os.path.join(directory, filename)))
