# src/envfile/loader.py
import logging
import os
from typing import Dict, Optional

from .environment import default_environment
from .errors import UnreadableFileError
from .parser import parse

log = logging.getLogger(__name__)


class Loader:
    """
    Bound to one env file. Parses it once per instance and applies the result
    to an environment, either keeping values that are already set
    (immutable=True) or overwriting them (immutable=False).
    """

    def __init__(self, file_path: str, immutable: bool = True, environment=None):
        self.file_path = file_path
        self.immutable = immutable
        self.environment = environment if environment is not None else default_environment()
        self._bucket: Optional[Dict[str, str]] = None

    def _read(self) -> str:
        if not os.path.exists(self.file_path):
            raise FileNotFoundError(f"Env file not found at: {self.file_path}")

        try:
            with open(self.file_path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise UnreadableFileError(self.file_path, "not valid UTF-8") from e
        except OSError as e:
            raise UnreadableFileError(self.file_path, e.strerror or str(e)) from e

    def populate_bucket(self):
        if self._bucket is not None:
            return

        log.debug("Reading env file %s", self.file_path)
        text = self._read()
        self._bucket = parse(
            text,
            environ=self.environment,
            prefer_environ=self.immutable,
            path=self.file_path,
        )
        log.debug("Parsed %d variable(s) from %s", len(self._bucket), self.file_path)

    def get_bucket(self) -> Dict[str, str]:
        self.populate_bucket()
        return dict(self._bucket)

    @property
    def is_populated(self) -> bool:
        return self._bucket is not None

    def load(self) -> Dict[str, str]:
        """Parse (if needed) and apply the bucket. Returns the full bucket."""
        self.populate_bucket()

        applied = skipped = 0
        for key, value in self._bucket.items():
            if self.immutable and self.environment.has(key):
                skipped += 1
                continue
            self.environment.set(key, value)
            applied += 1

        log.debug("Applied %d variable(s) from %s (%d already set, kept)", applied, self.file_path, skipped)
        return dict(self._bucket)

    def __repr__(self):
        mode = "immutable" if self.immutable else "overload"
        return f"Loader({self.file_path!r}, {mode})"
