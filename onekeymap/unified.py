"""Git-style unified diffs of text streams."""

from __future__ import annotations

from difflib import SequenceMatcher
from typing import IO, List, Union

DEFAULT_CONTEXT_LINES = 3
_NO_NEWLINE = "\\ No newline at end of file\n"


def _read(source: Union[IO, str, bytes, None]) -> str:
    if source is None:
        return ""
    data = source if isinstance(source, (str, bytes)) else source.read()
    return data.decode("utf-8") if isinstance(data, bytes) else data


def _range(start: int, count: int) -> str:
    if count == 1:
        return str(start + 1)
    if count == 0:
        return f"{start},0"
    return f"{start + 1},{count}"


def _line(marker: str, text: str) -> str:
    if text.endswith("\n"):
        return marker + text
    return marker + text + "\n" + _NO_NEWLINE


def unified_diff(before: Union[IO, str, bytes, None], after: Union[IO, str, bytes, None], file_path: str) -> str:
    """Return a unified diff of ``before`` and ``after`` with a ``diff --git`` header."""
    old = _read(before).splitlines(keepends=True)
    new = _read(after).splitlines(keepends=True)
    out: List[str] = [
        f"diff --git a/{file_path} b/{file_path}\n",
        f"--- a/{file_path}\n",
        f"+++ b/{file_path}\n",
    ]
    matcher = SequenceMatcher(a=old, b=new, autojunk=False)
    for group in matcher.get_grouped_opcodes(DEFAULT_CONTEXT_LINES):
        if all(tag == "equal" for tag, *_ in group):
            continue
        i1, i2 = group[0][1], group[-1][2]
        j1, j2 = group[0][3], group[-1][4]
        out.append(f"@@ -{_range(i1, i2 - i1)} +{_range(j1, j2 - j1)} @@\n")
        for tag, a1, a2, b1, b2 in group:
            if tag == "equal":
                out.extend(_line(" ", text) for text in old[a1:a2])
                continue
            out.extend(_line("-", text) for text in old[a1:a2])
            out.extend(_line("+", text) for text in new[b1:b2])
    return "".join(out)