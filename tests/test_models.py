"""
Tests for domain models — settings, tool refs, step results, generated files.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from gotth.core.models import GeneratedFile, ProjectSettings, StepResult, ToolRef


class TestProjectSettings:
    def test_defaults(self):
        s = ProjectSettings(name="demo")
        assert s.app_port == 42069
        assert s.proxy_port == 8090
        assert s.build_dir == "tmp"
        assert s.css_input == "static/css/input.css"
        assert s.css_output == "static/css/styles.css"

    def test_derived_paths(self):
        s = ProjectSettings(name="demo")
        assert s.main_go == "cmd/demo/main.go"
        assert s.binary_path == "tmp/main"

    def test_directories(self):
        s = ProjectSettings(name="demo")
        assert s.directories == [
            "static/js",
            "static/css",
            "views/components",
            "views/layouts",
            "views/pages",
            "cmd/demo",
        ]

    def test_rejects_unknown_keys(self):
        with pytest.raises(ValidationError):
            ProjectSettings(name="demo", colour="blue")

    def test_rejects_bad_port(self):
        with pytest.raises(ValidationError):
            ProjectSettings(name="demo", app_port=70000)

    def test_rejects_empty_name(self):
        with pytest.raises(ValidationError):
            ProjectSettings(name="")

    @pytest.mark.parametrize("value", ["", ".", "./", "..", "../other", "tmp/../..", "/tmp", "C:\\build"])
    def test_rejects_dirs_outside_project(self, value):
        with pytest.raises(ValidationError):
            ProjectSettings(name="demo", build_dir=value)

    @pytest.mark.parametrize("field", ["static_dir", "views_dir", "cmd_dir", "css_input", "css_output"])
    def test_every_layout_path_checked(self, field):
        with pytest.raises(ValidationError):
            ProjectSettings(name="demo", **{field: ".."})

    @pytest.mark.parametrize("value", ["..", ".", "a/b", "/abs"])
    def test_rejects_name_that_is_not_one_segment(self, value):
        with pytest.raises(ValidationError):
            ProjectSettings(name=value)

    def test_accepts_nested_build_dir(self):
        assert ProjectSettings(name="demo", build_dir="out/bin").binary_path == "out/bin/main"


class TestToolRef:
    def test_found_from_path(self):
        ref = ToolRef(id="go", label="Go", command="/usr/bin/go", source="path")
        assert ref.found

    def test_bare_is_not_found(self):
        ref = ToolRef(id="air", label="Air", command="air", source="bare")
        assert not ref.found
        assert ref.to_dict()["found"] is False


class TestStepResult:
    def test_success(self):
        r = StepResult.success("go build", ["go", "build"])
        assert r.ok
        assert not r.failed

    def test_failure(self):
        r = StepResult.failure("go build", ["go", "build"], error="boom", return_code=2)
        assert r.failed
        assert r.return_code == 2

    def test_skip(self):
        r = StepResult.skip("tailwind install", reason="already installed")
        assert r.status == "skipped"
        assert r.command == []


class TestGeneratedFile:
    def test_write_creates_parents(self, tmp_path: Path):
        gf = GeneratedFile(path="a/b/c.txt", content="hello")
        assert gf.write(tmp_path)
        assert (tmp_path / "a" / "b" / "c.txt").read_text() == "hello"

    def test_write_respects_existing(self, tmp_path: Path):
        (tmp_path / "c.txt").write_text("mine")
        gf = GeneratedFile(path="c.txt", content="theirs")
        assert not gf.write(tmp_path)
        assert (tmp_path / "c.txt").read_text() == "mine"

    def test_overwrite(self, tmp_path: Path):
        (tmp_path / "c.txt").write_text("mine")
        gf = GeneratedFile(path="c.txt", content="theirs", overwrite=True)
        assert gf.write(tmp_path)
        assert (tmp_path / "c.txt").read_text() == "theirs"
