"""Tests for load_runtime_config - defaults, config file, environment."""

import json
import os

import pytest

from shellsweep.config_runtime import DEFAULTS, load_runtime_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's SHELLSWEEP_* variables out of these tests."""
    for key in list(os.environ):
        if key.startswith("SHELLSWEEP_"):
            monkeypatch.delenv(key)


def write_config(root, data) -> None:
    cfg_dir = root / ".shellsweep"
    cfg_dir.mkdir()
    (cfg_dir / "config.json").write_text(json.dumps(data) if not isinstance(data, str) else data)


class TestDefaults:

    def test_defaults_without_config(self, tmp_path):
        cfg = load_runtime_config(str(tmp_path))
        assert cfg == DEFAULTS
        assert cfg["scan"]["excludes"] == ["*/.git/*", "*/vim/submodules/*", "*/bash/bash_exports"]
        assert cfg["scan"]["shebang"] == "#!/usr/bin/env bash"
        assert cfg["lint"]["severity"] == "warning"
        assert cfg["spinner"] == {"delay": 0.1, "width": 55, "frames": "|/-\\"}

    def test_defaults_are_not_mutated(self, tmp_path):
        cfg = load_runtime_config(str(tmp_path))
        cfg["scan"]["excludes"].append("*/build/*")
        assert "*/build/*" not in DEFAULTS["scan"]["excludes"]


class TestConfigFile:

    def test_file_overrides_defaults(self, tmp_path):
        write_config(tmp_path, {
            "scan": {"excludes": ["*/node_modules/*"]},
            "lint": {"severity": "error"},
        })
        cfg = load_runtime_config(str(tmp_path))

        assert cfg["scan"]["excludes"] == ["*/node_modules/*"]
        assert cfg["lint"]["severity"] == "error"
        assert cfg["scan"]["shebang"] == DEFAULTS["scan"]["shebang"]

    def test_wrong_types_ignored(self, tmp_path):
        write_config(tmp_path, {
            "spinner": {"width": "wide", "delay": True},
            "scan": {"excludes": "*/.git/*"},
        })
        cfg = load_runtime_config(str(tmp_path))

        assert cfg["spinner"]["width"] == 55
        assert cfg["spinner"]["delay"] == 0.1
        assert cfg["scan"]["excludes"] == DEFAULTS["scan"]["excludes"]

    def test_int_accepted_for_float(self, tmp_path):
        write_config(tmp_path, {"spinner": {"delay": 1}})
        assert load_runtime_config(str(tmp_path))["spinner"]["delay"] == 1

    def test_unknown_keys_ignored(self, tmp_path):
        write_config(tmp_path, {"lint": {"color": "always"}, "other": {"x": 1}})
        cfg = load_runtime_config(str(tmp_path))

        assert "color" not in cfg["lint"]
        assert "other" not in cfg

    def test_invalid_json_falls_back(self, tmp_path):
        write_config(tmp_path, "{not json")
        assert load_runtime_config(str(tmp_path)) == DEFAULTS


class TestEnvironment:

    def test_env_beats_file(self, tmp_path, monkeypatch):
        write_config(tmp_path, {"lint": {"severity": "error"}})
        monkeypatch.setenv("SHELLSWEEP_LINT_SEVERITY", "style")

        assert load_runtime_config(str(tmp_path))["lint"]["severity"] == "style"

    def test_list_from_comma_separated(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SHELLSWEEP_SCAN_EXCLUDES", "*/.git/*, */vendor/* ,")

        assert load_runtime_config(str(tmp_path))["scan"]["excludes"] == ["*/.git/*", "*/vendor/*"]

    def test_numbers_coerced(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SHELLSWEEP_SPINNER_WIDTH", "20")
        monkeypatch.setenv("SHELLSWEEP_SPINNER_DELAY", "0.25")
        cfg = load_runtime_config(str(tmp_path))

        assert cfg["spinner"]["width"] == 20
        assert cfg["spinner"]["delay"] == 0.25

    def test_bad_number_keeps_default(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SHELLSWEEP_SPINNER_WIDTH", "wide")

        assert load_runtime_config(str(tmp_path))["spinner"]["width"] == 55


class TestValueChecks:
    """Well-typed but unusable values keep the default."""

    @pytest.mark.parametrize("section,key,value", [
        ("lint", "severity", "bogus"),
        ("lint", "tool", "  "),
        ("scan", "shebang", ""),
        ("spinner", "frames", ""),
        ("spinner", "width", -5),
        ("spinner", "width", 0),
        ("spinner", "delay", -0.5),
        ("spinner", "delay", 0),
    ])
    def test_file_value_out_of_range(self, tmp_path, section, key, value):
        write_config(tmp_path, {section: {key: value}})

        assert load_runtime_config(str(tmp_path))[section][key] == DEFAULTS[section][key]

    @pytest.mark.parametrize("env_var,section,key", [
        ("SHELLSWEEP_LINT_SEVERITY=bogus", "lint", "severity"),
        ("SHELLSWEEP_SPINNER_FRAMES=", "spinner", "frames"),
        ("SHELLSWEEP_SPINNER_WIDTH=-3", "spinner", "width"),
        ("SHELLSWEEP_SPINNER_DELAY=-1", "spinner", "delay"),
        ("SHELLSWEEP_SPINNER_DELAY=nan", "spinner", "delay"),
        ("SHELLSWEEP_SPINNER_DELAY=inf", "spinner", "delay"),
        ("SHELLSWEEP_SCAN_SHEBANG=", "scan", "shebang"),
    ])
    def test_env_value_out_of_range(self, tmp_path, monkeypatch, env_var, section, key):
        name, _, value = env_var.partition("=")
        monkeypatch.setenv(name, value)

        assert load_runtime_config(str(tmp_path))[section][key] == DEFAULTS[section][key]

    def test_bad_env_keeps_valid_file_value(self, tmp_path, monkeypatch):
        write_config(tmp_path, {"lint": {"severity": "error"}})
        monkeypatch.setenv("SHELLSWEEP_LINT_SEVERITY", "loud")

        assert load_runtime_config(str(tmp_path))["lint"]["severity"] == "error"

    def test_empty_excludes_list_is_allowed(self, tmp_path):
        write_config(tmp_path, {"scan": {"excludes": []}})

        assert load_runtime_config(str(tmp_path))["scan"]["excludes"] == []

    def test_bad_value_is_logged(self, tmp_path, monkeypatch):
        from shellsweep.utils.logging import logger

        messages = []
        handler_id = logger.add(messages.append, level="WARNING", format="{message}")
        try:
            monkeypatch.setenv("SHELLSWEEP_LINT_SEVERITY", "bogus")
            load_runtime_config(str(tmp_path))
        finally:
            logger.remove(handler_id)

        assert any("SHELLSWEEP_LINT_SEVERITY" in m for m in messages)
