"""Command line configuration: defaults, YAML config file and environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence

import yaml

ENV_PREFIX = "ONEKEYMAP"
CONFIG_NAME = "onekeymap"
_EXTENSIONS = (".yaml", ".yml")
_TRUE = {"1", "t", "true", "y", "yes", "on"}
_FALSE = {"0", "f", "false", "n", "no", "off", ""}


class ConfigError(ValueError):
    """Raised when the configuration cannot be read or is invalid."""


@dataclass
class EditorConfig:
    keymap_path: str = ""
    sync_enabled: bool = False


@dataclass
class Config:
    verbose: bool = False
    quiet: bool = False
    sandbox: bool = False
    onekeymap: str = ""
    otel_exporter_otlp_endpoint: str = ""
    server_listen: str = ""
    editors: Dict[str, EditorConfig] = field(default_factory=dict)

    def validate(self) -> None:
        """Raise ConfigError when the settings contradict each other."""
        if self.verbose and self.quiet:
            raise ConfigError("verbose and quiet modes cannot be enabled simultaneously")


def _default_search_paths(home: str) -> Sequence[str]:
    return [".", os.path.join(home, ".config", "onekeymap"), "/etc/onekeymap"]


def _read_file(search_paths: Sequence[str]) -> Dict[str, Any]:
    for directory in search_paths:
        for ext in _EXTENSIONS:
            path = Path(directory) / (CONFIG_NAME + ext)
            if path.is_file():
                try:
                    data = yaml.safe_load(path.read_text(encoding="utf-8"))
                except (OSError, yaml.YAMLError) as err:
                    raise ConfigError(f"failed to read config file: {err}") from err
                if data is None:
                    return {}
                if not isinstance(data, dict):
                    raise ConfigError("failed to read config file: top level must be a mapping")
                return data
    return {}


def _lookup(data: Mapping[str, Any], dotted: str) -> Any:
    if dotted in data:
        return data[dotted]
    node: Any = data
    for part in dotted.split("."):
        if not isinstance(node, Mapping) or part not in node:
            return None
        node = node[part]
    return node


def _as_bool(value: Any, key: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ConfigError(f"unable to decode '{key}' as a boolean: {value!r}")


def load_config(
    sandbox: bool = False,
    environ: Optional[Mapping[str, str]] = None,
    search_paths: Optional[Sequence[str]] = None,
) -> Config:
    """Build a Config from defaults, the config file and ONEKEYMAP_* variables.

    In sandbox mode no config file is read and no default keymap path is set.
    """
    env = os.environ if environ is None else environ
    defaults: Dict[str, Any] = {
        "verbose": False,
        "quiet": False,
        "sandbox": False,
        "onekeymap": "",
        "otel.exporter.otlp.endpoint": "",
        "server.listen": "",
    }
    file_data: Dict[str, Any] = {}
    if not sandbox:
        home = env.get("HOME") or str(Path.home())
        defaults["onekeymap"] = os.path.join(home, ".config", "onekeymap", "onekeymap.json")
        file_data = _read_file(search_paths if search_paths is not None else _default_search_paths(home))

    values: Dict[str, Any] = {}
    for key, default in defaults.items():
        env_name = f"{ENV_PREFIX}_{key.replace('.', '_').upper()}"
        if env_name in env:
            values[key] = env[env_name]
            continue
        found = _lookup(file_data, key)
        values[key] = default if found is None else found

    editors: Dict[str, EditorConfig] = {}
    raw_editors = file_data.get("editors") or {}
    if not isinstance(raw_editors, Mapping):
        raise ConfigError("unable to decode into struct: 'editors' must be a mapping")
    for name, raw in raw_editors.items():
        raw = raw or {}
        editors[str(name)] = EditorConfig(
            keymap_path=str(raw.get("keymap_path") or ""),
            sync_enabled=_as_bool(raw.get("sync_enabled", False), "sync_enabled"),
        )

    cfg = Config(
        verbose=_as_bool(values["verbose"], "verbose"),
        quiet=_as_bool(values["quiet"], "quiet"),
        sandbox=_as_bool(values["sandbox"], "sandbox"),
        onekeymap=str(values["onekeymap"]),
        otel_exporter_otlp_endpoint=str(values["otel.exporter.otlp.endpoint"]),
        server_listen=str(values["server.listen"]),
        editors=editors,
    )
    cfg.validate()
    return cfg