"""Structural diffs of JSON-like values rendered as ANSI-coloured text."""

from __future__ import annotations

import dataclasses
import json
import re
from difflib import SequenceMatcher
from typing import Any, List, Tuple

_RED = "\x1b[30;41m"
_GREEN = "\x1b[30;42m"
_RESET = "\x1b[0m"
_ANSI = re.compile(r"\x1b\[[0-9;]*m")
_STEP = "  "

Line = Tuple[str, str]


class DiffTypeMismatchError(TypeError):
    """Raised when the two sides are not both objects or both arrays."""


def strip_ansi(text: str) -> str:
    """Remove ANSI colour sequences from ``text``."""
    return _ANSI.sub("", text)


def _default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"value of type {type(value).__name__} is not JSON serialisable")


def _normalize(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, (dict, list)):
        return value
    try:
        return json.loads(json.dumps(value, default=_default))
    except (TypeError, ValueError) as err:
        raise ValueError(f"failed to convert value to JSON: {err}") from err


def _render(value: Any, indent: str, prefix: str) -> List[str]:
    if isinstance(value, dict):
        inner = indent + _STEP
        items = list(value.items())
        lines = [f"{indent}{prefix}{{"]
        for pos, (key, item) in enumerate(items):
            sub = _render(item, inner, f"{json.dumps(key)}: ")
            if pos < len(items) - 1:
                sub[-1] += ","
            lines.extend(sub)
        lines.append(f"{indent}}}")
        return lines
    if isinstance(value, list):
        inner = indent + _STEP
        lines = [f"{indent}{prefix}["]
        for pos, item in enumerate(value):
            sub = _render(item, inner, f"{pos}: ")
            if pos < len(value) - 1:
                sub[-1] += ","
            lines.extend(sub)
        lines.append(f"{indent}]")
        return lines
    return [f"{indent}{prefix}{json.dumps(value, ensure_ascii=False)}"]


def _mark(marker: str, lines: List[str]) -> List[Line]:
    return [(marker, line) for line in lines]


def _with_comma(group: List[Line]) -> List[Line]:
    marker, text = group[-1]
    return group[:-1] + [(marker, text + ",")]


def _compare_value(old: Any, new: Any, indent: str, prefix: str) -> List[List[Line]]:
    if old == new:
        return [_mark(" ", _render(old, indent, prefix))]
    if isinstance(old, dict) and isinstance(new, dict):
        body = _diff_object(old, new, indent + _STEP)
        return [[(" ", f"{indent}{prefix}{{")] + body + [(" ", f"{indent}}}")]]
    if isinstance(old, list) and isinstance(new, list):
        body = _diff_array(old, new, indent + _STEP)
        return [[(" ", f"{indent}{prefix}[")] + body + [(" ", f"{indent}]")]]
    return [_mark("-", _render(old, indent, prefix)), _mark("+", _render(new, indent, prefix))]


def _join(elements: List[List[List[Line]]]) -> List[Line]:
    out: List[Line] = []
    for pos, groups in enumerate(elements):
        last = pos == len(elements) - 1
        for group in groups:
            out.extend(group if last else _with_comma(group))
    return out


def _diff_object(old: dict, new: dict, indent: str) -> List[Line]:
    elements: List[List[List[Line]]] = []
    for key in sorted(set(old) | set(new)):
        prefix = f"{json.dumps(key)}: "
        if key in old and key in new:
            elements.append(_compare_value(old[key], new[key], indent, prefix))
        elif key in old:
            elements.append([_mark("-", _render(old[key], indent, prefix))])
        else:
            elements.append([_mark("+", _render(new[key], indent, prefix))])
    return _join(elements)


def _diff_array(old: list, new: list, indent: str) -> List[Line]:
    keys_old = [json.dumps(v, sort_keys=True) for v in old]
    keys_new = [json.dumps(v, sort_keys=True) for v in new]
    elements: List[List[List[Line]]] = []
    matcher = SequenceMatcher(a=keys_old, b=keys_new, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            for i in range(i1, i2):
                elements.append([_mark(" ", _render(old[i], indent, f"{i}: "))])
            continue
        for i in range(i1, i2):
            elements.append([_mark("-", _render(old[i], indent, f"{i}: "))])
        for j in range(j1, j2):
            elements.append([_mark("+", _render(new[j], indent, f"{j}: "))])
    return _join(elements)


def _colour(marker: str, text: str) -> str:
    line = marker + text
    if marker == "-":
        return f"{_RED}{line}{_RESET}"
    if marker == "+":
        return f"{_GREEN}{line}{_RESET}"
    return line


def json_ascii_diff(before: Any, after: Any) -> str:
    """Return a coloured diff of two objects or two arrays; empty when equal."""
    old, new = _normalize(before), _normalize(after)
    if isinstance(old, dict) and isinstance(new, dict):
        open_, close = "{", "}"
        body = _diff_object
    elif isinstance(old, list) and isinstance(new, list):
        open_, close = "[", "]"
        body = _diff_array
    else:
        raise DiffTypeMismatchError("type mismatch: before and after are not both objects or arrays")
    if old == new:
        return ""
    lines = [(" ", open_)] + body(old, new, _STEP) + [(" ", close)]
    return "".join(_colour(marker, text) + "\n" for marker, text in lines)


def json_diff(before: Any, after: Any) -> str:
    """Like :func:`json_ascii_diff` but without colour codes."""
    return strip_ansi(json_ascii_diff(before, after))