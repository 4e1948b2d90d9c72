"""Small file helpers used by the commands: confirmation and backups."""

from __future__ import annotations

import os
import shutil
import sys
import time
from pathlib import Path
from typing import IO, Optional, Union


def confirm(path: str, input_stream: Optional[IO[str]] = None, output_stream: Optional[IO[str]] = None) -> bool:
    """Ask whether to write ``path``; only ``y`` or ``yes`` confirm."""
    if not path:
        raise ValueError("path is empty")
    out = output_stream if output_stream is not None else sys.stdout
    inp = input_stream if input_stream is not None else sys.stdin
    out.write(f"Write config to {path}? [y/N]: ")
    out.flush()
    answer = inp.readline().strip().lower()
    return answer in ("y", "yes")


def backup_if_exists(path: Union[str, os.PathLike]) -> Optional[str]:
    """Copy a regular file to ``<name>.bak-<timestamp>`` and return the copy's path.

    Returns None when there is no regular file at ``path``.
    """
    source = Path(path)
    if not source.exists() or not source.is_file():
        return None

    stamp = time.strftime("%Y%m%d-%H%M%S")
    backup = source.with_name(f"{source.name}.bak-{stamp}")
    suffix = 1
    while backup.exists():
        backup = source.with_name(f"{source.name}.bak-{stamp}-{suffix}")
        suffix += 1

    fd = os.open(backup, os.O_CREAT | os.O_WRONLY | os.O_EXCL, 0o600)
    with open(fd, "wb") as dst, source.open("rb") as src:
        shutil.copyfileobj(src, dst)
    return str(backup)