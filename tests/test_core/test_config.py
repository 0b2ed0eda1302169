"""Tests for goproj.core.config module."""

import json
import logging

from goproj.core.config import (
    CONFIG_ENV,
    PROJECTS_DIR_ENV,
    GoprojConfig,
    load_config,
)


class TestGoprojConfig:
    """Tests for GoprojConfig dataclass."""

    def test_defaults(self):
        cfg = GoprojConfig()
        assert cfg.projects_dir == "$HOME/projects"
        assert cfg.entry_point == "main.go"
        assert cfg.command_timeout is None

    def test_base_dir_expands_home(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert GoprojConfig().base_dir == tmp_path / "projects"

    def test_from_dict_ignores_unknown_keys(self):
        cfg = GoprojConfig.from_dict({"go_command": "go1.22", "color": "blue"})
        assert cfg.go_command == "go1.22"

    def test_to_dict_roundtrip(self):
        cfg = GoprojConfig(projects_dir="/srv/code", command_timeout=60)
        assert GoprojConfig.from_dict(cfg.to_dict()) == cfg


class TestLoadConfig:
    """Tests for load_config()."""

    def test_missing_file_gives_defaults(self, tmp_path, monkeypatch):
        monkeypatch.delenv(PROJECTS_DIR_ENV, raising=False)
        assert load_config(tmp_path / "missing.json") == GoprojConfig()

    def test_reads_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv(PROJECTS_DIR_ENV, raising=False)
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"projects_dir": "/srv/code", "command_timeout": 120}))

        cfg = load_config(path)
        assert cfg.projects_dir == "/srv/code"
        assert cfg.command_timeout == 120

    def test_env_selects_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv(PROJECTS_DIR_ENV, raising=False)
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"entry_point": "cmd.go"}))
        monkeypatch.setenv(CONFIG_ENV, str(path))

        assert load_config().entry_point == "cmd.go"

    def test_env_overrides_projects_dir(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"projects_dir": "/srv/code"}))
        monkeypatch.setenv(PROJECTS_DIR_ENV, str(tmp_path / "elsewhere"))

        cfg = load_config(path)
        assert cfg.base_dir == tmp_path / "elsewhere"

    def test_corrupt_file_warns_and_uses_defaults(self, tmp_path, monkeypatch, caplog):
        monkeypatch.delenv(PROJECTS_DIR_ENV, raising=False)
        path = tmp_path / "config.json"
        path.write_text("{not json")

        with caplog.at_level(logging.WARNING, logger="goproj.core.config"):
            cfg = load_config(path)

        assert cfg == GoprojConfig()
        assert "Could not read config file" in caplog.text

    def test_non_object_ignored(self, tmp_path, monkeypatch):
        monkeypatch.delenv(PROJECTS_DIR_ENV, raising=False)
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")
        assert load_config(path) == GoprojConfig()
