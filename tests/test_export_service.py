import io

import pytest

from onekeymap.export_service import (
    DiffType,
    ExportError,
    ExportOptions,
    ExportService,
    PluginExportReport,
)
from onekeymap.model import Keymap


class _Exporter:
    def __init__(self, write_content="", base_cfg=None, export_cfg=None, diff=None):
        self.write_content = write_content
        self.base_cfg = base_cfg
        self.export_cfg = export_cfg
        self.diff = diff

    def export(self, destination, setting, existing_config=None):
        if self.write_content:
            destination.write(self.write_content)
        if existing_config is not None:
            existing_config.read()
        return PluginExportReport(
            diff=self.diff, base_editor_config=self.base_cfg, export_editor_config=self.export_cfg
        )


class _Plugin:
    def __init__(self, exporter):
        self._exporter = exporter

    def exporter(self):
        return self._exporter


def _service(exporter):
    return ExportService({"test": _Plugin(exporter)}, None)


def test_unified_diff():
    after = "line1\nline2\n"
    out = io.StringIO()
    report = _service(_Exporter(write_content=after)).export(
        out,
        Keymap(),
        ExportOptions("test", base=io.StringIO("line1\n"), diff_type=DiffType.UNIFIED_DIFF, file_path="test.txt"),
    )
    assert out.getvalue() == after
    want = "diff --git a/test.txt b/test.txt\n--- a/test.txt\n+++ b/test.txt\n@@ -1 +1,2 @@\n line1\n+line2\n"
    assert report.diff == want


def test_ascii_diff_from_structured_configs():
    exporter = _Exporter(base_cfg={"k": "v1"}, export_cfg={"k": "v2"})
    report = _service(exporter).export(io.StringIO(), Keymap(), ExportOptions("test", diff_type=DiffType.ASCII_DIFF))
    want = ' {\n\x1b[30;41m-  "k": "v1"\x1b[0m\n\x1b[30;42m+  "k": "v2"\x1b[0m\n }\n'
    assert report.diff == want


def test_fallback_diff_from_plugin():
    report = _service(_Exporter(diff="fallback-diff")).export(
        io.StringIO(), Keymap(), ExportOptions("test", diff_type=DiffType.UNSPECIFIED)
    )
    assert report.diff == "fallback-diff"


def test_unknown_editor_raises():
    with pytest.raises(ExportError, match="no plugin found"):
        _service(_Exporter()).export(io.StringIO(), Keymap(), ExportOptions("nope"))