"""Tests for the template selection rule engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from frontgen.core import rules as rules_module
from frontgen.core.configuration import Configuration, HtmlOption, JsTemplate, Structure
from frontgen.core.errors import InternalInvariantViolation, Rejection
from frontgen.core.requests import GenerationRequest, Generator
from frontgen.core.rules import RuleOutcome, TemplateSelection, select_templates

if TYPE_CHECKING:
    from tests.conftest import MakeConfig, MakeRequest


def _ids(outcome: RuleOutcome | Rejection) -> list[str]:
    assert isinstance(outcome, RuleOutcome), str(outcome)
    return [selection.template_id for selection in outcome.selections]


# ---------------------------------------------------------------------------
# Name checks
# ---------------------------------------------------------------------------


class TestNameRequired:
    """Every generator rejects a missing name before anything else.

    Requests are constructed directly, bypassing build_request's own check.
    """

    @pytest.mark.parametrize(
        "overrides",
        [
            {},
            {"htmlOption": "None (Vanilla HTML)"},
            {"structure": "Single Page Application", "jsFramework": "React"},
            {"structure": "server-rendered"},
        ],
    )
    def test_empty_view_name(
        self, make_config: MakeConfig, overrides: dict[str, str],
    ) -> None:
        request = GenerationRequest(Generator.VIEW, "")
        result = select_templates(make_config(**overrides), request)
        assert isinstance(result, Rejection)
        assert result.reason == "name-required"

    def test_empty_factory_name_checked_before_framework(
        self, make_config: MakeConfig,
    ) -> None:
        result = select_templates(make_config(), GenerationRequest(Generator.FACTORY, ""))
        assert isinstance(result, Rejection)
        assert result.reason == "name-required"

    def test_whitespace_name(self, make_config: MakeConfig) -> None:
        result = select_templates(make_config(), GenerationRequest(Generator.VIEW, "   "))
        assert isinstance(result, Rejection)
        assert result.reason == "name-required"

    def test_name_without_letters_or_digits(self, make_config: MakeConfig) -> None:
        result = select_templates(make_config(), GenerationRequest(Generator.VIEW, "?!"))
        assert isinstance(result, Rejection)
        assert result.reason == "name-required"


# ---------------------------------------------------------------------------
# Static site / server rendered
# ---------------------------------------------------------------------------


class TestHtmlViews:
    """htmlOption x view type table."""

    @pytest.mark.parametrize(
        ("html_option", "template_id", "extension"),
        [("Jade", "view.jade", "jade"), ("Swig", "view.swig", "swig")],
    )
    @pytest.mark.parametrize(
        ("view_type", "destination"),
        [
            ("page", "{root}/templates"),
            ("component", "{root}/templates/components"),
            ("template", "{root}/templates/templates"),
        ],
    )
    def test_templated_html(
        self, make_config: MakeConfig, make_request: MakeRequest,
        html_option: str, template_id: str, extension: str,
        view_type: str, destination: str,
    ) -> None:
        result = select_templates(
            make_config(htmlOption=html_option),
            make_request("Foo", view_type=view_type),
        )
        assert isinstance(result, RuleOutcome)
        assert result.selections == (TemplateSelection(template_id, destination, extension),)

    def test_vanilla_page(
        self, make_config: MakeConfig, make_request: MakeRequest,
    ) -> None:
        result = select_templates(make_config(htmlOption="vanilla"), make_request("Foo"))
        assert _ids(result) == ["view.html"]

    @pytest.mark.parametrize("view_type", ["component", "template"])
    def test_vanilla_only_pages(
        self, make_config: MakeConfig, make_request: MakeRequest, view_type: str,
    ) -> None:
        result = select_templates(
            make_config(htmlOption="None (Vanilla HTML)"),
            make_request("Foo", view_type=view_type),
        )
        assert isinstance(result, Rejection)
        assert result.reason == "unsupported-view-kind"
        assert "Vanilla HTML" in result.message

    def test_use_template_ignored_for_non_page(
        self, make_config: MakeConfig, make_request: MakeRequest,
    ) -> None:
        """Non-fatal: the selection is produced together with a notice."""
        result = select_templates(
            make_config(),
            make_request("Foo", view_type="component", use_template=True),
        )
        assert isinstance(result, RuleOutcome)
        assert _ids(result) == ["view.jade"]
        assert len(result.notices) == 1
        assert "ignored" in result.notices[0]

    def test_use_template_on_page_has_no_notice(
        self, make_config: MakeConfig, make_request: MakeRequest,
    ) -> None:
        result = select_templates(make_config(), make_request("Foo", use_template=True))
        assert isinstance(result, RuleOutcome)
        assert result.notices == ()

    def test_server_rendered_ignores_js_template(
        self, make_config: MakeConfig, make_request: MakeRequest,
    ) -> None:
        with_jst = select_templates(
            make_config(structure="server-rendered", htmlOption="Swig", jsTemplate="React"),
            make_request("Foo"),
        )
        without = select_templates(
            make_config(structure="server-rendered", htmlOption="Swig"),
            make_request("Foo"),
        )
        assert with_jst == without
        assert _ids(with_jst) == ["view.swig"]


# ---------------------------------------------------------------------------
# Single page app
# ---------------------------------------------------------------------------


def _spa(make_config: MakeConfig, **overrides: str) -> Configuration:
    settings = {
        "structure": "Single Page Application",
        "jsFramework": "Backbone",
        "jsTemplate": "Handlebars",
        **overrides,
    }
    return make_config(**settings)


class TestSinglePageApp:
    """Script, spec and at most one template body."""

    @pytest.mark.parametrize(
        ("js_template", "body_id"),
        [
            ("Lo-dash (Underscore)", "template.jst"),
            ("Handlebars", "template.hbs"),
            ("Jade", "template.jade"),
        ],
    )
    def test_template_bodies(
        self, make_config: MakeConfig, make_request: MakeRequest,
        js_template: str, body_id: str,
    ) -> None:
        result = select_templates(_spa(make_config, jsTemplate=js_template), make_request())
        assert _ids(result) == ["view.js", "view-spec.js", body_id]

    def test_no_js_template_yields_script_and_spec(
        self, make_config: MakeConfig, make_request: MakeRequest,
    ) -> None:
        result = select_templates(_spa(make_config, jsTemplate="none"), make_request())
        assert _ids(result) == ["view.js", "view-spec.js"]

    def test_react_framework_rejected(
        self, make_config: MakeConfig, make_request: MakeRequest,
    ) -> None:
        result = select_templates(_spa(make_config, jsFramework="React"), make_request())
        assert isinstance(result, Rejection)
        assert result.reason == "react-uses-dedicated-subgenerator"

    def test_react_js_template_rejected(
        self, make_config: MakeConfig, make_request: MakeRequest,
    ) -> None:
        result = select_templates(_spa(make_config, jsTemplate="React"), make_request())
        assert isinstance(result, Rejection)
        assert result.reason == "react-uses-dedicated-subgenerator"

    def test_view_type_ignored_with_notice(
        self, make_config: MakeConfig, make_request: MakeRequest,
    ) -> None:
        result = select_templates(_spa(make_config), make_request(view_type="component"))
        assert isinstance(result, RuleOutcome)
        assert len(result.selections) == 3
        assert result.notices


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


class TestFactory:
    """Factories need Angular; the paired test file follows useTesting."""

    @pytest.mark.parametrize("framework", ["none", "Backbone", "React"])
    def test_requires_angular(
        self, make_config: MakeConfig, make_request: MakeRequest, framework: str,
    ) -> None:
        result = select_templates(
            make_config(jsFramework=framework), make_request("auth", Generator.FACTORY),
        )
        assert isinstance(result, Rejection)
        assert result.reason == "factory-requires-angular"

    def test_without_testing(
        self, make_config: MakeConfig, make_request: MakeRequest,
    ) -> None:
        result = select_templates(
            make_config(jsFramework="Angular"), make_request("auth", Generator.FACTORY),
        )
        assert _ids(result) == ["factory.js"]

    def test_with_testing(
        self, make_config: MakeConfig, make_request: MakeRequest,
    ) -> None:
        result = select_templates(
            make_config(jsFramework="Angular", useTesting=True),
            make_request("auth", Generator.FACTORY),
        )
        assert _ids(result) == ["factory.js", "factory.spec.js"]

    def test_structure_not_consulted(
        self, make_config: MakeConfig, make_request: MakeRequest,
    ) -> None:
        result = select_templates(
            make_config(jsFramework="Angular", structure="spa", jsTemplate="React"),
            make_request("auth", Generator.FACTORY),
        )
        assert _ids(result) == ["factory.js"]


# ---------------------------------------------------------------------------
# Model
# ---------------------------------------------------------------------------


class TestModel:
    """Models exist only in non-React single page apps."""

    @pytest.mark.parametrize("structure", ["Static Site", "server-rendered"])
    def test_requires_single_page_app(
        self, make_config: MakeConfig, make_request: MakeRequest, structure: str,
    ) -> None:
        result = select_templates(
            make_config(structure=structure, jsFramework="Backbone"),
            make_request("user", Generator.MODEL),
        )
        assert isinstance(result, Rejection)
        assert result.reason == "model-requires-single-page-app"

    @pytest.mark.parametrize(
        "overrides", [{"jsFramework": "React"}, {"jsTemplate": "React"}],
    )
    def test_react_rejected(
        self, make_config: MakeConfig, make_request: MakeRequest,
        overrides: dict[str, str],
    ) -> None:
        result = select_templates(
            _spa(make_config, **overrides), make_request("user", Generator.MODEL),
        )
        assert isinstance(result, Rejection)
        assert result.reason == "react-uses-dedicated-subgenerator"
        assert "model subgenerator" in result.message

    def test_without_testing(
        self, make_config: MakeConfig, make_request: MakeRequest,
    ) -> None:
        result = select_templates(_spa(make_config), make_request("user", Generator.MODEL))
        assert _ids(result) == ["model.js"]

    def test_with_testing(
        self, make_config: MakeConfig, make_request: MakeRequest,
    ) -> None:
        config = make_config(
            structure="Single Page Application", jsFramework="Backbone", useTesting=True,
        )
        result = select_templates(config, make_request("user", Generator.MODEL))
        assert _ids(result) == ["model.js", "model-spec.js"]

    def test_js_template_not_consulted(
        self, make_config: MakeConfig, make_request: MakeRequest,
    ) -> None:
        for js_template in ("none", "Handlebars", "Jade"):
            result = select_templates(
                _spa(make_config, jsTemplate=js_template),
                make_request("user", Generator.MODEL),
            )
            assert _ids(result) == ["model.js"]


# ---------------------------------------------------------------------------
# Table coverage
# ---------------------------------------------------------------------------


class TestTableCoverage:
    """Every enum member reaches a rule or a deliberate rejection."""

    def test_every_structure_has_rules(self) -> None:
        assert set(rules_module._STRUCTURE_RULES) == set(Structure)

    def test_every_html_option_has_rules(self) -> None:
        assert set(rules_module._HTML_VIEWS) == set(HtmlOption)

    def test_every_non_react_js_template_has_rules(self) -> None:
        assert set(rules_module._SPA_TEMPLATE_BODIES) == set(JsTemplate) - {JsTemplate.REACT}

    def test_missing_row_is_internal_violation(
        self,
        make_config: MakeConfig,
        make_request: MakeRequest,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """A gap in a table fails loudly instead of defaulting."""
        monkeypatch.delitem(rules_module._HTML_VIEWS, HtmlOption.SWIG)
        with pytest.raises(InternalInvariantViolation):
            select_templates(make_config(htmlOption="Swig"), make_request("Foo"))
