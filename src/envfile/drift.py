"""
drift.py - value-sensitive comparison between a local bucket and a template.
"""
from typing import Dict

from .migrate import quote_value

NO_CHANGES = "# No changes #\n"
ADD_HEADER = "# Add to the file {path}\n"
SURPLUS_HEADER = "# Also, these entries are surplus. Remove them?\n"


def compare_buckets(local: Dict[str, str], reference: Dict[str, str]) -> dict:
    """
    missing: reference entries the local bucket lacks or holds with another value
    surplus: local entries the reference lacks or holds with another value
    A key whose values differ ends up in both.
    """
    if not isinstance(local, dict):
        local = {}
    if not isinstance(reference, dict):
        reference = {}

    missing = {k: v for k, v in reference.items() if k not in local or local[k] != v}
    surplus = {k: v for k, v in local.items() if k not in reference or reference[k] != v}

    return {
        "missing": missing,
        "surplus": surplus,
    }


def has_changes(result: dict) -> bool:
    return bool(result["missing"]) or bool(result["surplus"])


def format_change_report(result: dict, file_path: str) -> str:
    """
    Render the drift as text. Values are quoted the way dump_env writes them,
    so the missing lines can be pasted into the local file as they are.
    """
    if not has_changes(result):
        return NO_CHANGES

    output = [ADD_HEADER.format(path=file_path), "\n"]
    for key, value in result["missing"].items():
        output.append(f"{key}={quote_value(value)}\n")

    if result["surplus"]:
        output.append("\n")
        output.append(SURPLUS_HEADER)
        output.append("\n")
        for key, value in result["surplus"].items():
            output.append(f"# - {key}={quote_value(value)}\n")

    return "".join(output)
