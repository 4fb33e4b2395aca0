"""Tests for main.main(): the appmeta command line."""

from pathlib import Path

import pytest

from appmeta.main import main

_SWAGGER = '{"swagger": "2.0", "info": {"title": "Kubernetes", "version": "v1.7.0"}}'


@pytest.fixture(autouse=True)
def _isolate(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    cfg = tmp_path / "cfg"
    cfg.mkdir()
    monkeypatch.setenv("APPMETA_DIR", str(cfg))
    monkeypatch.delenv("APPMETA_API_SPEC", raising=False)
    monkeypatch.delenv("APPMETA_LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def swagger(tmp_path: Path) -> Path:
    path = tmp_path / "swagger.json"
    path.write_text(_SWAGGER)
    return path


class TestInitCommand:
    def test_creates_app(self, tmp_path: Path, swagger: Path, capsys):
        app = tmp_path / "app"
        main(["init", str(app), "--api-spec", f"file:{swagger}"])

        assert (app / ".ksonnet").is_dir()
        assert (app / "environments" / "default" / "schema.json").read_text() == (
            _SWAGGER
        )
        assert f"Created app at {app}" in capsys.readouterr().out

    def test_uses_configured_api_spec(
        self, tmp_path: Path, swagger: Path, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.setenv("APPMETA_API_SPEC", f"file:{swagger}")
        main(["init", "app"])
        assert (tmp_path / "app" / "vendor").is_dir()

    def test_missing_api_spec(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["init", "app"])
        assert exc_info.value.code == 1
        assert "No cluster spec source" in capsys.readouterr().err

    def test_existing_dir(self, tmp_path: Path, swagger: Path, capsys):
        (tmp_path / "app").mkdir()
        with pytest.raises(SystemExit) as exc_info:
            main(["init", "app", "--api-spec", f"file:{swagger}"])
        assert exc_info.value.code == 1
        assert "already exists" in capsys.readouterr().err


class TestRootCommand:
    def test_prints_root(self, tmp_path: Path, swagger: Path, capsys):
        main(["init", "app", "--api-spec", f"file:{swagger}"])
        capsys.readouterr()

        main(["root", str(tmp_path / "app" / "components")])
        assert capsys.readouterr().out.strip() == str(tmp_path / "app")

    def test_not_in_app(self, tmp_path: Path, capsys):
        (tmp_path / "elsewhere").mkdir()
        with pytest.raises(SystemExit):
            main(["root", str(tmp_path / "elsewhere")])
        assert "No app found" in capsys.readouterr().err


class TestComponentsCommand:
    def test_lists_sorted(self, tmp_path: Path, swagger: Path, capsys):
        main(["init", "app", "--api-spec", f"file:{swagger}"])
        components = tmp_path / "app" / "components"
        (components / "b.jsonnet").write_text("{}")
        (components / "a.jsonnet").write_text("{}")
        capsys.readouterr()

        main(["components", str(components)])
        lines = capsys.readouterr().out.splitlines()
        assert lines == [str(components / "a.jsonnet"), str(components / "b.jsonnet")]

    def test_defaults_to_cwd(
        self, tmp_path: Path, swagger: Path, monkeypatch: pytest.MonkeyPatch, capsys
    ):
        main(["init", "app", "--api-spec", f"file:{swagger}"])
        (tmp_path / "app" / "components" / "x.jsonnet").write_text("{}")
        monkeypatch.chdir(tmp_path / "app")
        capsys.readouterr()

        main(["components"])
        assert capsys.readouterr().out.strip().endswith("x.jsonnet")


class TestSettingsErrors:
    def test_invalid_settings_fail_init(self, tmp_path: Path, swagger: Path, capsys):
        (tmp_path / "cfg" / "settings.toml").write_text('log_level = "LOUD"\n')
        with pytest.raises(SystemExit) as exc_info:
            main(["init", "app", "--api-spec", f"file:{swagger}"])
        assert exc_info.value.code == 1
        assert "Invalid log_level" in capsys.readouterr().err
        assert not (tmp_path / "app").exists()

    def test_invalid_settings_ignored_by_root(
        self, tmp_path: Path, swagger: Path, capsys
    ):
        main(["init", "app", "--api-spec", f"file:{swagger}"])
        (tmp_path / "cfg" / "settings.toml").write_text('log_level = "LOUD"\n')
        capsys.readouterr()

        main(["root", str(tmp_path / "app")])
        assert capsys.readouterr().out.strip() == str(tmp_path / "app")

    def test_invalid_settings_ignored_by_components(
        self, tmp_path: Path, swagger: Path, capsys
    ):
        main(["init", "app", "--api-spec", f"file:{swagger}"])
        (tmp_path / "app" / "components" / "x.jsonnet").write_text("{}")
        (tmp_path / "cfg" / "settings.toml").write_text("api_spec = \n")
        capsys.readouterr()

        main(["components", str(tmp_path / "app")])
        assert capsys.readouterr().out.strip().endswith("x.jsonnet")
