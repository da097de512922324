import re
from typing import Dict, Iterable, List

from .errors import MissingRequiredVariableError, ValidationError

BOOLEAN_VALUES = ("true", "false", "1", "0", "yes", "no", "on", "off")
_INTEGER = re.compile(r"[+-]?\d+")


class Validator:
    """
    Checks a set of variables once they have been loaded.

    Construction fails with MissingRequiredVariableError (naming every absent
    variable) unless all of them exist in the environment or in the loader's
    bucket. The assertion methods return self so they can be chained:

        Validator(["DB_HOST", "DB_PORT"], loader).not_empty()
        Validator(["DB_PORT"], loader).is_integer()
    """

    _compiled_patterns = {}

    def __init__(self, variables: Iterable[str], loader, environment=None):
        if isinstance(variables, str):
            variables = [variables]
        self.variables: List[str] = list(variables)
        self.loader = loader
        self.environment = environment if environment is not None else loader.environment

        missing = [name for name in self.variables if self._value(name) is None]
        if missing:
            raise MissingRequiredVariableError(missing)

    def _value(self, name):
        # the environment reflects what the process sees after load()/overload()
        if self.environment.has(name):
            return self.environment.get(name)
        return self.loader.get_bucket().get(name)

    def values(self) -> Dict[str, str]:
        return {name: self._value(name) for name in self.variables}

    def _assert(self, check, message):
        failures = {}
        for name in self.variables:
            if not check(self._value(name)):
                failures[name] = message
        if failures:
            raise ValidationError(failures)
        return self

    # ---------------------------
    # Assertions
    # ---------------------------
    def not_empty(self):
        return self._assert(lambda v: v.strip() != "", "is empty")

    def is_integer(self):
        return self._assert(lambda v: bool(_INTEGER.fullmatch(v.strip())), "is not an integer")

    def is_boolean(self):
        return self._assert(lambda v: v.strip().lower() in BOOLEAN_VALUES, "is not a boolean")

    def allowed_values(self, choices: Iterable[str]):
        choices = list(choices)
        return self._assert(
            lambda v: v in choices,
            "is not one of [" + ", ".join(choices) + "]",
        )

    def matches(self, pattern: str):
        if pattern not in self._compiled_patterns:
            self._compiled_patterns[pattern] = re.compile(pattern)
        regex = self._compiled_patterns[pattern]
        return self._assert(lambda v: bool(regex.fullmatch(v)), "does not match required pattern")
