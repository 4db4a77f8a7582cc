"""Unit tests for Config (webstarter.config).

Tests cover:
- Defaults and derived paths
- Project name validation
- git_timeout validation
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from webstarter.config import Config

pytestmark = pytest.mark.unit


class TestConfigDefaults:
    def test_base_dir_defaults_to_cwd(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = Config(project_name="myApp")
        assert config.base_dir.resolve() == tmp_path.resolve()
        assert config.project_path.name == "myApp"

    def test_defaults(self):
        config = Config(project_name="myApp", base_dir=Path("/tmp"))
        assert config.init_git is True
        assert config.git_timeout is None

    def test_base_dir_coerced_from_str(self):
        config = Config(project_name="myApp", base_dir="/srv/sites")
        assert config.base_dir == Path("/srv/sites")

    def test_relative_file_paths(self):
        config = Config(project_name="myApp")
        assert config.stylesheet_file == "myApp/styles/main.css"
        assert config.script_file == "myApp/src/index.js"
        assert config.markup_file == "myApp/index.html"

    def test_project_name_required(self):
        with pytest.raises(ValidationError):
            Config()


class TestProjectNameValidation:
    @pytest.mark.parametrize("name", ["myApp", "my-app", "my app", "app.v2", "über"])
    def test_accepted(self, name: str):
        assert Config(project_name=name).project_name == name

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_rejected(self, name: str):
        with pytest.raises(ValidationError, match="must not be empty"):
            Config(project_name=name)

    @pytest.mark.parametrize("name", ["a/b", "../escape", "a\\b", "/abs"])
    def test_separators_rejected(self, name: str):
        with pytest.raises(ValidationError, match="path separators"):
            Config(project_name=name)

    @pytest.mark.parametrize("name", [".", ".."])
    def test_dot_names_rejected(self, name: str):
        with pytest.raises(ValidationError):
            Config(project_name=name)

    def test_nul_rejected(self):
        with pytest.raises(ValidationError, match="NUL"):
            Config(project_name="a\x00b")

    def test_undecodable_argv_bytes_rejected(self):
        # os.fsdecode(b"ab\xff") on a UTF-8 system yields a lone surrogate.
        with pytest.raises(ValidationError, match="not valid UTF-8"):
            Config(project_name="ab\udcff")


class TestGitTimeout:
    def test_positive_accepted(self):
        assert Config(project_name="x", git_timeout=1.5).git_timeout == 1.5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError):
            Config(project_name="x", git_timeout=0)
