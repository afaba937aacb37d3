"""Tests for the folio CLI."""

import json

import pytest

from folio.cli import main

_ENV_VARS = (
    "APP_ENV",
    "SHOW_ERRORS",
    "FOLIO_ROUTES_DIR",
    "FOLIO_EXTENSION",
    "FOLIO_FILES_LIST",
    "FOLIO_PROJECT_NAME",
    "FOLIO_BACKEND_ONLY",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def project(tmp_path):
    routes = tmp_path / "src" / "app"
    for relative in (
        "layout.py",
        "index.py",
        "about/route.py",
        "users/[id]/index.py",
        "docs/[...slug]/index.py",
    ):
        target = routes / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text("")
    return tmp_path


class TestMain:
    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "folio" in capsys.readouterr().out


class TestRoutes:
    def test_lists_table(self, project, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", str(project)])
        out = capsys.readouterr().out
        assert "KIND" in out
        assert "about/route.py" in out
        assert "users/[id]/index.py" in out

    def test_empty(self, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
        (tmp_path / "src" / "app").mkdir(parents=True)
        main(["routes", str(tmp_path)])
        assert "No route files found." in capsys.readouterr().out

    def test_missing_routes_dir(self, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", str(tmp_path)])
        assert exc_info.value.code == 1
        assert "Routes directory not found" in capsys.readouterr().err

    def test_files_list(self, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
        listing = tmp_path / "files-list.json"
        listing.write_text(json.dumps(["./src/app/index.php", "./src/app/about/route.php"]))
        main(["routes", str(tmp_path), "--files-list", "files-list.json", "--extension", "php"])
        out = capsys.readouterr().out
        assert "about/route.php" in out
        assert "route " in out


class TestResolve:
    def test_dynamic(self, project, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resolve", "/users/42", str(project)])
        out = capsys.readouterr().out
        assert "content:  users/[id]/index.py" in out
        assert "id = 42" in out

    def test_catch_all_json(self, project, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resolve", "/docs/a/b", str(project), "--json"])
        data = json.loads(capsys.readouterr().out)
        assert data["content_file"] == "docs/[...slug]/index.py"
        assert data["params"] == {"slug": ["a", "b"]}
        assert data["layouts"] == ["layout.py"]

    def test_not_found_exits_1(self, project, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", "/nowhere", str(project)])
        assert exc_info.value.code == 1
        assert "<not found>" in capsys.readouterr().out


class TestCheck:
    def test_clean(self, project, capsys: pytest.CaptureFixture[str]) -> None:
        main(["check", str(project)])
        assert "No duplicate routes (5 file(s) checked)." in capsys.readouterr().out

    def test_duplicates_exit_1(self, project, capsys: pytest.CaptureFixture[str]) -> None:
        grouped = project / "src" / "app" / "(marketing)" / "about"
        grouped.mkdir(parents=True)
        (grouped / "route.py").write_text("")

        with pytest.raises(SystemExit) as exc_info:
            main(["check", str(project)])
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "Duplicate route found after normalization: about/route.py" in err
        assert "- Grouped original route: (marketing)/about/route.py" in err

    def test_runs_in_production(
        self,
        project,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("APP_ENV", "production")
        grouped = project / "src" / "app" / "(x)"
        grouped.mkdir()
        (grouped / "index.py").write_text("")

        with pytest.raises(SystemExit) as exc_info:
            main(["check", str(project)])
        assert exc_info.value.code == 1
        assert "Duplicate route found after normalization: index.py" in capsys.readouterr().err
