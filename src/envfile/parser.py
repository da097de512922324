"""
parser.py - turn env file text into an ordered bucket (dict of str -> str).

Grammar, one physical line at a time:

    # comment
    NAME=value            # inline comment
    NAME="double quoted with \\n escapes and ${OTHER} references"
    NAME='single quoted, taken literally'
    export NAME=value
    NAME                  (empty value)

Parsing is pure: nothing outside the returned dict is touched. Every
malformed line is collected and reported together in one MalformedLineError.
"""
import re
from typing import Dict, Tuple

from .errors import MalformedLineError

_LINE_SPLIT = re.compile(r"\r\n|\r|\n")
_EXPORT_PREFIX = re.compile(r"^export\s+")
_BRACED_REF = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")
_BARE_REF = re.compile(r"\$([A-Za-z_][A-Za-z0-9_]*)")

# escapes honoured inside double quotes
_ESCAPES = {
    "n": "\n",
    "r": "\r",
    '"': '"',
    "\\": "\\",
    "$": "$",
}


class _LineError(ValueError):
    pass


def parse(text: str, environ=None, prefer_environ=False, path=None) -> Dict[str, str]:
    """
    Parse env file text into an ordered dict.

    environ: anything with .get(name) (os.environ, a dict, an Environment);
    only consulted for ${NAME} references in double-quoted values.
    prefer_environ: when a reference is defined both earlier in the file and
    in environ, take the environ value instead of the file's.
    """
    if text.startswith("\ufeff"):
        text = text[1:]

    bucket = {}
    issues = []

    def lookup(name):
        env_value = environ.get(name) if environ is not None else None
        if prefer_environ and env_value is not None:
            return env_value
        if name in bucket:
            return bucket[name]
        return env_value if env_value is not None else ""

    for line_no, raw in enumerate(_LINE_SPLIT.split(text), start=1):
        line = raw.strip()

        # skip empty/comment lines
        if not line or line.startswith("#"):
            continue

        try:
            key, value = parse_line(line, lookup)
        except _LineError as e:
            issues.append((line_no, raw, str(e)))
            continue

        # last assignment wins
        bucket[key] = value

    if issues:
        raise MalformedLineError(issues, path=path)
    return bucket


def parse_line(line: str, lookup=None) -> Tuple[str, str]:
    line = _EXPORT_PREFIX.sub("", line, count=1)

    name, _, value = line.partition("=")
    name = name.strip()
    if not name:
        raise _LineError("empty variable name")
    if any(c.isspace() for c in name):
        raise _LineError("variable name contains whitespace")
    if "\x00" in name:
        raise _LineError("NUL character in name")

    value = parse_value(value.strip(), lookup or (lambda _name: ""))
    # os.environ rejects NUL; catch it here so nothing gets applied
    if "\x00" in value:
        raise _LineError("NUL character in value")
    return name, value


def parse_value(value: str, lookup) -> str:
    if not value:
        return ""
    if value[0] in ("'", '"'):
        return _parse_quoted(value, value[0], lookup)
    return _parse_unquoted(value)


def _parse_unquoted(value: str) -> str:
    out = []
    i = 0
    while i < len(value):
        ch = value[i]
        if ch == "\\" and value[i + 1:i + 2] == "#":
            out.append("#")
            i += 2
            continue
        if ch == "#":
            break
        out.append(ch)
        i += 1
    return "".join(out).strip()


def _parse_quoted(value: str, quote: str, lookup) -> str:
    double = quote == '"'
    out = []
    i = 1
    n = len(value)
    while i < n:
        ch = value[i]
        if ch == quote:
            break
        if double and ch == "\\" and i + 1 < n and value[i + 1] in _ESCAPES:
            out.append(_ESCAPES[value[i + 1]])
            i += 2
            continue
        if double and ch == "$":
            ref, consumed = _read_reference(value, i)
            if ref is not None:
                out.append(lookup(ref))
                i += consumed
                continue
        out.append(ch)
        i += 1
    else:
        raise _LineError("unterminated quoted value")

    rest = value[i + 1:].strip()
    if rest and not rest.startswith("#"):
        raise _LineError("unexpected characters after closing quote")
    return "".join(out)


def _read_reference(value: str, pos: int):
    for pattern in (_BRACED_REF, _BARE_REF):
        m = pattern.match(value, pos)
        if m:
            return m.group(1), m.end() - pos
    return None, 1
