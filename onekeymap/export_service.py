"""Exporting a universal keymap through an editor plugin."""

from __future__ import annotations

import io
from dataclasses import dataclass
from enum import Enum
from typing import IO, Any, Optional

from .jsondiff import json_ascii_diff
from .model import Keymap
from .unified import unified_diff


class DiffType(Enum):
    """Kind of diff to compute for an export."""

    UNSPECIFIED = 0
    UNIFIED_DIFF = 1
    ASCII_DIFF = 2


class ExportError(RuntimeError):
    """Raised when an export cannot be carried out."""


@dataclass
class ExportOptions:
    editor_type: str
    base: Optional[IO] = None
    diff_type: DiffType = DiffType.UNSPECIFIED
    file_path: str = ""


@dataclass
class ExportReport:
    diff: str = ""


@dataclass
class PluginExportReport:
    """What a plugin's exporter reports back."""

    diff: Optional[str] = None
    base_editor_config: Any = None
    export_editor_config: Any = None


class _Tee:
    def __init__(self, destination: IO) -> None:
        self._destination = destination
        self.buffer = io.StringIO()

    def write(self, data: Any) -> int:
        self._destination.write(data)
        self.buffer.write(data.decode("utf-8") if isinstance(data, bytes) else data)
        return len(data)

    def flush(self) -> None:
        flush = getattr(self._destination, "flush", None)
        if flush is not None:
            flush()


class ExportService:
    """Looks up a plugin and writes a keymap in its editor's format."""

    def __init__(self, registry: Any, mapping_config: Any = None) -> None:
        self._registry = registry
        self._mapping_config = mapping_config

    def export(self, destination: IO, setting: Keymap, options: ExportOptions) -> ExportReport:
        """Write ``setting`` to ``destination`` and return the requested diff."""
        plugin = self._registry.get(options.editor_type)
        if plugin is None:
            raise ExportError(f"no plugin found for editor type '{options.editor_type}'")
        try:
            exporter = plugin.exporter()
        except Exception as err:
            raise ExportError(f"failed to get exporter for {options.editor_type}: {err}") from err

        base_text: Optional[str] = None
        if options.base is not None:
            data = options.base.read()
            base_text = data.decode("utf-8") if isinstance(data, bytes) else data

        tee = _Tee(destination)
        existing = io.StringIO(base_text) if base_text is not None else None
        try:
            report = exporter.export(tee, setting, existing_config=existing)
        except Exception as err:
            raise ExportError(f"failed to export config: {err}") from err

        return ExportReport(diff=self._compute_diff(options, base_text, tee.buffer.getvalue(), report))

    @staticmethod
    def _compute_diff(
        options: ExportOptions,
        original: Optional[str],
        updated: str,
        report: Optional[PluginExportReport],
    ) -> str:
        if options.diff_type is DiffType.UNIFIED_DIFF:
            return unified_diff(original or "", updated, options.file_path)
        if options.diff_type is DiffType.ASCII_DIFF:
            before = report.base_editor_config if report is not None else None
            after = report.export_editor_config if report is not None else None
            try:
                return json_ascii_diff(before, after)
            except (TypeError, ValueError) as err:
                raise ExportError(f"failed to compute ascii json diff: {err}") from err
        if report is not None and report.diff is not None:
            return report.diff
        return ""