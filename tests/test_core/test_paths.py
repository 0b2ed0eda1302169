"""Tests for goproj.core.paths module."""

from pathlib import Path

import pytest

from goproj.core.errors import InvalidNameError
from goproj.core.paths import normalize_base, resolve_project_path


class TestResolveProjectPath:
    """Tests for resolve_project_path()."""

    def test_joins_name_onto_base(self, tmp_path):
        assert resolve_project_path(tmp_path, "demo") == tmp_path / "demo"

    def test_accepts_string_base(self, tmp_path):
        assert resolve_project_path(str(tmp_path), "demo") == tmp_path / "demo"

    def test_normalizes_base(self, tmp_path):
        messy = f"{tmp_path}/sub/../"
        assert resolve_project_path(messy, "demo") == tmp_path / "demo"

    def test_does_not_touch_filesystem(self, tmp_path):
        resolve_project_path(tmp_path / "missing", "demo")
        assert not (tmp_path / "missing").exists()

    @pytest.mark.parametrize("name", ["", "   "])
    def test_rejects_empty_name(self, tmp_path, name):
        with pytest.raises(InvalidNameError):
            resolve_project_path(tmp_path, name)

    @pytest.mark.parametrize("name", ["..", ".", "../escape", "a/../../b", "x/y", "..\\evil"])
    def test_rejects_traversal_and_separators(self, tmp_path, name):
        with pytest.raises(InvalidNameError):
            resolve_project_path(tmp_path, name)

    def test_rejects_nul_byte(self, tmp_path):
        with pytest.raises(InvalidNameError, match="NUL"):
            resolve_project_path(tmp_path, "de\x00mo")

    def test_dotted_name_is_fine(self, tmp_path):
        assert resolve_project_path(tmp_path, "my.tool") == tmp_path / "my.tool"

    def test_result_always_inside_base(self, tmp_path):
        for name in ["demo", "a-b", "v2..x"]:
            path = resolve_project_path(tmp_path, name)
            assert path.parent == tmp_path


class TestNormalizeBase:
    """Tests for normalize_base()."""

    def test_expands_user(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert normalize_base("~/projects") == tmp_path / "projects"

    def test_makes_absolute(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        assert normalize_base("projects") == Path.cwd() / "projects"
