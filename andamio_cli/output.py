"""JSON rendering of query results, to stdout or to a file."""

import json
from pathlib import Path
from typing import Any, Optional

_ESCAPES = (
    ("<", "\\u003c"),
    (">", "\\u003e"),
    ("&", "\\u0026"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)


def _jsonable(obj: Any) -> Any:
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if isinstance(obj, (list, tuple)):
        return [_jsonable(item) for item in obj]
    if isinstance(obj, dict):
        return {key: _jsonable(value) for key, value in obj.items()}
    return obj


def to_json(response: Any) -> str:
    """Render a response as two-space indented JSON with HTML-safe escaping."""
    text = json.dumps(_jsonable(response), indent=2, ensure_ascii=False)
    for char, escaped in _ESCAPES:
        text = text.replace(char, escaped)
    return text


def save_output(response: Any, out_file: Optional[str] = None) -> str:
    """Write the JSON of a response to out_file, or print it when no file is given.

    Returns the rendered JSON text.
    """
    text = to_json(response)
    if out_file:
        Path(out_file).write_text(text, encoding="utf-8")
        print(f"Response saved as JSON to file: {out_file}")
    else:
        print(text)
    return text