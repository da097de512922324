# src/envfile/errors.py


class EnvFileError(Exception):
    """Base class for every error raised by envfile."""


class UnreadableFileError(EnvFileError, OSError):
    def __init__(self, path, reason=""):
        self.path = path
        self.reason = reason
        msg = f"Unable to read env file: {path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)

    def __str__(self):
        return self.args[0]


class MalformedLineError(EnvFileError, ValueError):
    """
    Raised once per parse with every malformed line collected.
    issues: list of tuples (line_no, content, reason)
    """

    def __init__(self, issues, path=None):
        self.issues = list(issues)
        self.path = path
        first = self.issues[0] if self.issues else (0, "", "")
        self.line_no = first[0]
        self.content = first[1]
        super().__init__(self._format())

    def _format(self):
        where = f" in {self.path}" if self.path else ""
        lines = [f"{len(self.issues)} malformed line(s){where}:"]
        for line_no, content, reason in self.issues:
            lines.append(f"  line {line_no}: {reason}: {content!r}")
        return "\n".join(lines)


class ValidationError(EnvFileError):
    """failures: dict name -> message"""

    def __init__(self, failures):
        self.failures = dict(failures)
        msg = "; ".join(f"{k} {v}" for k, v in self.failures.items())
        super().__init__(f"One or more environment variables failed assertions: {msg}")


class MissingRequiredVariableError(ValidationError):
    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__({name: "is missing" for name in self.missing})

    def __str__(self):
        return "Required environment variable(s) missing: " + ", ".join(self.missing)


class ConfigError(EnvFileError):
    pass
