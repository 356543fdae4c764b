from __future__ import annotations

import json
import math
import re
import sys
from pathlib import Path
from typing import Iterable, Sequence, TextIO

from jsonmask.exceptions import (
    DocumentParseError,
    InputAccessError,
    JsonMaskError,
    StdinUsageError,
)
from jsonmask.json_types import JSONValue
from jsonmask.numbers import INT_RANGE, UINT_RANGE

STDIN_ALIAS = "-"
TABLE_SEPARATOR = "-----"

_WHITESPACE_RE = re.compile(r"[ \t\n\r]*")


class _RejectedNumber(ValueError):
    pass


def _reject_constant(token: str) -> float:
    raise _RejectedNumber(f"{token} is not a JSON number")


def _parse_float(token: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        raise _RejectedNumber(f"number {token} is out of range")
    return value


def _parse_int(token: str) -> int:
    value = int(token)
    if value in UINT_RANGE or value in INT_RANGE:
        return value
    # Wider integers are handled as floats and must fit one.
    try:
        float(value)
    except OverflowError:
        raise _RejectedNumber(f"number {token} is out of range") from None
    return value


def _decoder() -> json.JSONDecoder:
    return json.JSONDecoder(
        parse_constant=_reject_constant,
        parse_float=_parse_float,
        parse_int=_parse_int,
    )


def load_document_text(text: str, *, source: str = "<string>") -> JSONValue:
    """Parse exactly one JSON document from `text`."""
    try:
        return _decoder().decode(text)
    except json.JSONDecodeError as exc:
        raise DocumentParseError(source, exc.msg, line=exc.lineno, column=exc.colno) from exc
    except ValueError as exc:
        raise DocumentParseError(source, str(exc)) from exc


def load_document_stream(text: str, *, source: str = "<stdin>") -> list[JSONValue]:
    """Parse a sequence of whitespace-separated JSON values from `text`."""
    decoder = _decoder()
    documents: list[JSONValue] = []
    idx = _WHITESPACE_RE.match(text, 0).end()
    while idx < len(text):
        try:
            document, end = decoder.raw_decode(text, idx)
        except json.JSONDecodeError as exc:
            raise DocumentParseError(source, exc.msg, line=exc.lineno, column=exc.colno) from exc
        except ValueError as exc:
            raise DocumentParseError(source, str(exc)) from exc
        next_idx = _WHITESPACE_RE.match(text, end).end()
        if next_idx == end and next_idx < len(text):
            # `1"a"` or `[]{}` is ambiguous without a separator between values.
            exc = json.JSONDecodeError("Expected whitespace between values", text, end)
            raise DocumentParseError(source, exc.msg, line=exc.lineno, column=exc.colno)
        documents.append(document)
        idx = next_idx
    if not documents:
        raise DocumentParseError(source, "no JSON value found")
    return documents


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise DocumentParseError(str(path), f"not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise InputAccessError(str(path), exc.strerror or str(exc)) from exc


def load_document_path(path: Path) -> JSONValue:
    return load_document_text(_read_text(path), source=str(path))


def load_documents(
    sources: Sequence[str],
    *,
    stdin: TextIO | None = None,
) -> list[JSONValue]:
    """Read and parse every source before returning anything.

    A lone `-` reads a stream of JSON values from stdin; otherwise each source
    is a path holding exactly one document.
    """
    if not sources:
        raise JsonMaskError("no input sources given")
    if STDIN_ALIAS in sources:
        if len(sources) != 1:
            raise StdinUsageError(
                f"'{STDIN_ALIAS}' reads from stdin and cannot be combined with other inputs"
            )
        stream = stdin if stdin is not None else sys.stdin
        try:
            text = stream.read()
        except UnicodeDecodeError as exc:
            raise DocumentParseError("<stdin>", f"not valid UTF-8 ({exc.reason})") from exc
        except OSError as exc:
            raise InputAccessError("<stdin>", exc.strerror or str(exc)) from exc
        return load_document_stream(text)
    return [load_document_path(Path(source)) for source in sources]


def render_document(value: JSONValue, *, pretty: bool = False) -> str:
    if pretty:
        return json.dumps(value, indent=2, ensure_ascii=False)
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def render_table_lines(pairs: Iterable[tuple[object, object]]) -> list[str]:
    """Render `original: obfuscated` lines followed by the separator."""
    lines = [
        f"{json.dumps(original, ensure_ascii=False)}: {json.dumps(replacement, ensure_ascii=False)}"
        for original, replacement in pairs
    ]
    lines.append(TABLE_SEPARATOR)
    return lines
