"""
environment.py - the get/set/has capability the Loader writes through.
"""
import os
from typing import Dict, Optional


class ProcessEnvironment:
    """Live view of os.environ."""

    def get(self, name: str) -> Optional[str]:
        return os.environ.get(name)

    def set(self, name: str, value: str):
        os.environ[name] = value

    def has(self, name: str) -> bool:
        return name in os.environ

    def __repr__(self):
        return "ProcessEnvironment()"


class DictEnvironment:
    """In-memory environment, handy for tests and for embedding."""

    def __init__(self, initial: Dict[str, str] = None):
        self.data = dict(initial or {})

    def get(self, name: str) -> Optional[str]:
        return self.data.get(name)

    def set(self, name: str, value: str):
        self.data[name] = value

    def has(self, name: str) -> bool:
        return name in self.data

    def __repr__(self):
        return f"DictEnvironment({self.data!r})"


def default_environment():
    return ProcessEnvironment()
