"""Behaviour tests for incremental documentation builds.

These pytest-bdd scenarios prove that repeated ``PageGenerator`` runs only
rewrite pages whose rendered HTML changed. The feature file
``incremental_build.feature`` drives a small catalog through documentation and
markup example builds, then inspects which files each run wrote.

Usage
-----
Run ``pytest tests/bdd/test_incremental_build.py -v`` after installing the
test extras (``pip install -e .[test]``). Output is written under pytest's
``tmp_path`` so no cleanup is required.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from ds_pages.catalog import Catalog
from ds_pages.config import SiteConfig
from ds_pages.generator import GenerationReport, PageGenerator, PageRenderer

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "incremental_build.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {"reports": {}}


@given("a catalog with a documented button and two modifiers")
def given_catalog(tmp_path: Path, scenario_state: ScenarioState) -> None:
    """Build a generator rooted in a temporary docs directory."""
    config = SiteConfig(docs_root=tmp_path / "docs")
    renderer = PageRenderer(
        config.render_settings(),
        tree_renderer=lambda page: f"<main><h1>{page.header}</h1></main>",
    )
    scenario_state["docs_root"] = config.docs_root
    scenario_state["generator"] = PageGenerator(config, renderer=renderer)
    scenario_state["payload"] = {
        "pages": [
            {
                "reference": "components.button",
                "referenceURI": "components/button",
                "header": "Buttons",
                "markup": '<button class="ds-c-button {{modifier}}">Go</button>',
                "modifiers": [{"name": "--primary"}, {"name": "--danger"}],
            },
            {
                "reference": "components.badge",
                "referenceURI": "components/badge",
                "header": "Badge",
            },
        ],
        "routes": [],
    }


@when(
    parsers.re(
        r"I generate the (?P<kind>documentation|markup example) pages(?P<again>(?: again)?)"
    )
)
def when_generate(kind: str, again: str, scenario_state: ScenarioState) -> None:
    """Run the generator and store the report under the build's label."""
    generator = typ.cast("PageGenerator", scenario_state["generator"])
    catalog = Catalog.from_payload(scenario_state["payload"])
    report = generator.generate(catalog, without_ui=kind == "markup example")
    label = f"{kind}{' again' if again else ''}"
    scenario_state["reports"][label] = report


@when(parsers.parse('the button header changes to "{header}"'))
def when_header_changes(header: str, scenario_state: ScenarioState) -> None:
    button = scenario_state["payload"]["pages"][0]
    button["header"] = header


def _report(scenario_state: ScenarioState, label: str) -> GenerationReport:
    return typ.cast("GenerationReport", scenario_state["reports"][label])


@then(
    parsers.re(
        r"the first (?P<kind>documentation|example) build wrote (?P<count>\d+) files?"
    ),
    converters={"count": int},
)
def then_first_build_wrote(
    kind: str, count: int, scenario_state: ScenarioState
) -> None:
    label = "documentation" if kind == "documentation" else "markup example"
    docs_root = typ.cast("Path", scenario_state["docs_root"])
    written = _report(scenario_state, label).written_paths
    button_written = [
        path for path in written if "button" in path.relative_to(docs_root).as_posix()
    ]
    assert len(button_written) == count, (
        f"expected {count} button page(s) written, got {button_written}"
    )


@then("the repeated builds wrote nothing")
def then_repeated_builds_idle(scenario_state: ScenarioState) -> None:
    for label in ("documentation again", "markup example again"):
        report = _report(scenario_state, label)
        assert report.results, f"expected results for {label}"
        assert not any(report.results), f"expected no writes for {label}"


@then("only the button documentation page was rewritten")
def then_only_button_rewritten(scenario_state: ScenarioState) -> None:
    docs_root = typ.cast("Path", scenario_state["docs_root"])
    report = _report(scenario_state, "documentation again")
    button_path = docs_root / "components" / "button" / "index.html"
    assert report.written_paths == [button_path]
    assert "<h1>Button</h1>" in button_path.read_text(encoding="utf-8")
