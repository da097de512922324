# src/envfile/json_output.py

import json

from .errors import MalformedLineError, MissingRequiredVariableError, ValidationError

VERSION = "1.0.0"


def to_json(data, pretty=False):
    """Convert result dict into JSON string."""
    if pretty:
        return json.dumps(data, indent=4, ensure_ascii=False)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def describe_error(exc):
    """
    Turn an exception into a JSON-friendly error entry.
    Malformed lines and failed assertions keep their per-line / per-name detail.
    """
    entry = {"type": type(exc).__name__, "message": str(exc)}
    if isinstance(exc, MalformedLineError):
        entry["lines"] = [
            {"line": line_no, "content": content, "reason": reason}
            for line_no, content, reason in exc.issues
        ]
    elif isinstance(exc, MissingRequiredVariableError):
        entry["missing"] = list(exc.missing)
    elif isinstance(exc, ValidationError):
        entry["failures"] = dict(exc.failures)
    return entry


def wrap_json_response(
        action: str,
        success: bool,
        file=None,
        errors=None,
        details=None
    ):
    """Standardize JSON output structure."""
    return {
        "tool": "envfile",
        "version": VERSION,
        "action": action,
        "success": success,
        "file": file,
        "errors": errors or [],
        "details": details or {},
    }
