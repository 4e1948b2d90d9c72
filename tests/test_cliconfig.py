import pytest

from onekeymap.cliconfig import Config, ConfigError, load_config


def test_defaults_without_file(tmp_path):
    cfg = load_config(False, {"HOME": str(tmp_path)}, [str(tmp_path)])
    assert cfg.verbose is False and cfg.quiet is False
    assert cfg.onekeymap == str(tmp_path / ".config" / "onekeymap" / "onekeymap.json")
    assert cfg.editors == {}


def test_sandbox_has_no_default_path(tmp_path):
    cfg = load_config(True, {"HOME": str(tmp_path)}, [str(tmp_path)])
    assert cfg.onekeymap == ""


def test_file_values(tmp_path):
    (tmp_path / "onekeymap.yaml").write_text(
        "verbose: true\nserver:\n  listen: unix:///tmp/x.sock\neditors:\n  zed:\n    keymap_path: /k.json\n"
    )
    cfg = load_config(False, {"HOME": str(tmp_path)}, [str(tmp_path)])
    assert cfg.verbose is True
    assert cfg.server_listen == "unix:///tmp/x.sock"
    assert cfg.editors["zed"].keymap_path == "/k.json"


def test_env_overrides_file(tmp_path):
    (tmp_path / "onekeymap.yaml").write_text("otel:\n  exporter:\n    otlp:\n      endpoint: a\n")
    env = {"HOME": str(tmp_path), "ONEKEYMAP_OTEL_EXPORTER_OTLP_ENDPOINT": "b"}
    assert load_config(False, env, [str(tmp_path)]).otel_exporter_otlp_endpoint == "b"


def test_verbose_and_quiet_conflict(tmp_path):
    env = {"HOME": str(tmp_path), "ONEKEYMAP_VERBOSE": "true", "ONEKEYMAP_QUIET": "true"}
    with pytest.raises(ConfigError):
        load_config(False, env, [str(tmp_path)])


def test_validate():
    with pytest.raises(ConfigError):
        Config(verbose=True, quiet=True).validate()