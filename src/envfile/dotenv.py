"""
dotenv.py - public entry points.

    from envfile.dotenv import Dotenv

    dotenv = Dotenv(project_dir)          # <project_dir>/.env
    dotenv.load()                         # keep variables that are already set
    dotenv.required(["DB_HOST", "DB_USER"]).not_empty()

    report = dotenv.compare()             # against <project_dir>/.env.dist
    print(report["changes"])
"""
import os
from typing import Dict, Iterable, Optional, Union

from .drift import compare_buckets, format_change_report, has_changes
from .loader import Loader
from .paths import DEFAULT_DIST_FILE, DEFAULT_ENV_FILE, resolve_file_path
from .validator import Validator


class Dotenv:
    def __init__(self, path: str, filename: Optional[str] = DEFAULT_ENV_FILE, environment=None):
        self.file_path = resolve_file_path(path, filename)
        self.environment = environment
        self.loader = Loader(self.file_path, immutable=True, environment=environment)

    def load(self) -> Dict[str, str]:
        """Load the file, leaving already-set variables untouched."""
        self.loader = Loader(self.file_path, immutable=True, environment=self.environment)
        return self.loader.load()

    def overload(self) -> Dict[str, str]:
        """Load the file, overwriting already-set variables."""
        self.loader = Loader(self.file_path, immutable=False, environment=self.environment)
        return self.loader.load()

    def required(self, variables: Union[str, Iterable[str]]) -> Validator:
        return Validator(variables, self.loader)

    def compare(self, path: Optional[str] = None, filename: Optional[str] = DEFAULT_DIST_FILE) -> dict:
        """
        Compare this file with a template (by default .env.dist beside it) and
        report entries to add and entries that look surplus.
        """
        local, reference, dist_path = self._comparison_buckets(path, filename)
        result = compare_buckets(local, reference)
        return {
            "file": self.file_path,
            "dist_file": dist_path,
            "missing": result["missing"],
            "surplus": result["surplus"],
            "has_changes": has_changes(result),
            "changes": format_change_report(result, self.file_path),
        }

    def _comparison_buckets(self, dist_dir, dist_file):
        local = self.loader.get_bucket()

        if dist_dir is None:
            dist_dir = os.path.dirname(self.file_path)
        dist_path = resolve_file_path(dist_dir, dist_file, default=DEFAULT_DIST_FILE)
        reference = Loader(dist_path, immutable=True, environment=self.environment).get_bucket()

        return local, reference, dist_path


def load(path: str, filename: Optional[str] = DEFAULT_ENV_FILE, environment=None) -> Dict[str, str]:
    return Dotenv(path, filename, environment=environment).load()


def overload(path: str, filename: Optional[str] = DEFAULT_ENV_FILE, environment=None) -> Dict[str, str]:
    return Dotenv(path, filename, environment=environment).overload()


def compare(path: str, filename: Optional[str] = DEFAULT_ENV_FILE, dist_path: Optional[str] = None,
            dist_filename: Optional[str] = DEFAULT_DIST_FILE, environment=None) -> dict:
    return Dotenv(path, filename, environment=environment).compare(dist_path, dist_filename)
