"""Tests for the ``pages generate`` command.

The command function is invoked directly with keyword arguments, the same way
Cyclopts dispatches it, inside a temporary working directory so printed paths
are relative and predictable.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from ds_pages.cli import generate
from ds_pages.generator import GenerationError


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a catalog and config in a temporary working directory."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "pages.yaml").write_text(
        "docs_root: site\nenvironment: development\n", encoding="utf-8"
    )
    (tmp_path / "catalog.json").write_text(
        json.dumps(
            {
                "pages": [
                    {
                        "reference": "components.button",
                        "referenceURI": "components/button",
                        "header": "Buttons",
                        "markup": "<button>Go</button>",
                        "modifiers": [{"name": "--primary"}],
                    },
                    {"reference": "components.badge", "markup": "<span></span>"},
                ],
                "routes": [],
            }
        ),
        encoding="utf-8",
    )
    return tmp_path


def test_generate_prints_written_files(
    workspace: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    generate(catalog=Path("catalog.json"))

    out = capsys.readouterr().out.splitlines()
    assert "wrote site/components/button/index.html" in out
    assert out[-1] == "1 written, 0 unchanged, 1 skipped, 0 failed"
    html = (workspace / "site" / "components" / "button" / "index.html").read_text(
        encoding="utf-8"
    )
    assert '<div id="js-root">\n    <div></div>' in html


def test_generate_without_ui_and_root_path(
    workspace: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    generate(catalog=Path("catalog.json"), without_ui=True, root_path="/ds")

    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "3 written, 0 unchanged, 0 skipped, 0 failed"
    assert (workspace / "site" / "ds" / "example" / "components" / "button--primary").is_dir()


def test_second_run_reports_unchanged(
    workspace: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    generate(catalog=Path("catalog.json"))
    capsys.readouterr()
    generate(catalog=Path("catalog.json"))

    out = capsys.readouterr().out.splitlines()
    assert out == ["0 written, 1 unchanged, 1 skipped, 0 failed"]


def test_overrides_take_precedence(
    workspace: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    generate(
        catalog=Path("catalog.json"),
        docs_root=workspace / "out",
        environment="production",
    )

    html = (workspace / "out" / "components" / "button" / "index.html").read_text(
        encoding="utf-8"
    )
    assert "<h1" in html
    assert "wrote out/components/button/index.html" in capsys.readouterr().out


def test_missing_default_config_uses_defaults(
    workspace: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (workspace / "config" / "pages.yaml").unlink()
    generate(catalog=Path("catalog.json"))
    assert (workspace / "docs" / "components" / "button" / "index.html").exists()
    assert capsys.readouterr().out


def test_explicit_missing_config_is_an_error(workspace: Path) -> None:
    with pytest.raises(FileNotFoundError):
        generate(catalog=Path("catalog.json"), config=workspace / "absent.yaml")


def test_failed_pages_raise_after_generation(
    workspace: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (workspace / "catalog.json").write_text(
        json.dumps(
            {
                "pages": [
                    {"reference": "assets", "referenceURI": "public"},
                    {"reference": "guides.intro", "referenceURI": "guides/intro"},
                ]
            }
        ),
        encoding="utf-8",
    )

    with pytest.raises(GenerationError):
        generate(catalog=Path("catalog.json"))

    assert (workspace / "site" / "guides" / "intro" / "index.html").exists()
    assert "1 failed" in capsys.readouterr().out
