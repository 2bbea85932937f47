"""Rule engine: decides which templates a request materializes.

Decision order:
    1. name      - every generator needs a usable name
    2. generator - factories and models have their own rules
    3. structure - each structure consults only its own sub-option

Each branch either returns the complete ordered selection list or a single
Rejection. No path is derived here; the planner resolves paths only after
a branch has succeeded.

Structure tables:
    static-site / server-rendered -> htmlOption x view type
    single-page-app               -> jsFramework/jsTemplate (React rejected)

Models are single-page-app only and follow the same React rejection.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TypeVar

from frontgen.core.configuration import (
    Configuration,
    HtmlOption,
    JsFramework,
    JsTemplate,
    Structure,
)
from frontgen.core.errors import InternalInvariantViolation, Rejection
from frontgen.core.requests import GenerationRequest, Generator, ViewType, check_name

K = TypeVar("K")
V = TypeVar("V")

# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TemplateSelection:
    """One template chosen for a request, before its path is known.

    Attributes:
        template_id: Logical template identifier (e.g. ``view.jade``).
        destination_key: Directory token with ``{root}``, ``{directory}``
            or ``{slug}`` placeholders.
        extension: File extension without the leading dot.
        suffix: Appended to the slug before the extension (e.g. ``-spec``).
    """

    template_id: str
    destination_key: str
    extension: str
    suffix: str = ""


@dataclass(frozen=True)
class RuleOutcome:
    """Successful decision: ordered selections plus non-fatal notices."""

    selections: tuple[TemplateSelection, ...]
    notices: tuple[str, ...] = ()


RuleResult = RuleOutcome | Rejection

# ---------------------------------------------------------------------------
# Decision tables
# ---------------------------------------------------------------------------

_ALL_VIEW_TYPES = frozenset(ViewType)

# htmlOption -> (template id, extension, legal view types)
_HTML_VIEWS: dict[HtmlOption, tuple[str, str, frozenset[ViewType]]] = {
    HtmlOption.JADE: ("view.jade", "jade", _ALL_VIEW_TYPES),
    HtmlOption.SWIG: ("view.swig", "swig", _ALL_VIEW_TYPES),
    HtmlOption.VANILLA: ("view.html", "html", frozenset({ViewType.PAGE})),
}

_VIEW_DESTINATIONS: dict[ViewType, str] = {
    ViewType.PAGE: "{root}/templates",
    ViewType.COMPONENT: "{root}/templates/components",
    ViewType.TEMPLATE: "{root}/templates/templates",
}

# jsTemplate -> template body (id, extension); None means script + spec only
_SPA_TEMPLATE_BODIES: dict[JsTemplate, tuple[str, str] | None] = {
    JsTemplate.NONE: None,
    JsTemplate.UNDERSCORE: ("template.jst", "jst"),
    JsTemplate.HANDLEBARS: ("template.hbs", "hbs"),
    JsTemplate.JADE: ("template.jade", "jade"),
}

_SPA_VIEW_SCRIPT = TemplateSelection("view.js", "{root}/scripts/templates", "js")
_SPA_VIEW_SPEC = TemplateSelection(
    "view-spec.js", "test/spec/templates", "js", suffix="-spec",
)

_MODEL_SCRIPT = TemplateSelection("model.js", "{root}/scripts/models", "js")
_MODEL_SPEC = TemplateSelection(
    "model-spec.js", "test/spec/models", "js", suffix="-spec",
)

_FACTORY_SCRIPT = TemplateSelection("factory.js", "{directory}/{slug}", "factory.js")
_FACTORY_SPEC = TemplateSelection(
    "factory.spec.js", "{directory}/{slug}", "factory.spec.js",
)


def _lookup(table: Mapping[K, V], key: K, table_name: str) -> V:
    """Fetch a decision table row; a missing row is a rule engine defect."""
    try:
        return table[key]
    except KeyError:
        raise InternalInvariantViolation(
            f"No rule in {table_name} for {key!r}"
        ) from None


# ---------------------------------------------------------------------------
# Branches
# ---------------------------------------------------------------------------


def _html_view_rules(
    config: Configuration, request: GenerationRequest,
) -> RuleResult:
    """Page/component/template views for HTML-templated structures."""
    template_id, extension, legal_types = _lookup(
        _HTML_VIEWS, config.html_option, "html views",
    )
    if request.view_type not in legal_types:
        if config.html_option is HtmlOption.VANILLA:
            message = (
                "You have chosen to use Vanilla HTML, so only pages can be "
                + "generated. Try: frontgen generate view mypage"
            )
        else:
            allowed = ", ".join(sorted(t.value for t in legal_types))
            message = f"Must use a supported type: {allowed}"
        return Rejection("unsupported-view-kind", message)

    notices: tuple[str, ...] = ()
    if request.options.use_template and request.view_type is not ViewType.PAGE:
        notices = (
            'The template option will be ignored as the type is not "page"',
        )

    destination = _lookup(_VIEW_DESTINATIONS, request.view_type, "view destinations")
    return RuleOutcome(
        selections=(TemplateSelection(template_id, destination, extension),),
        notices=notices,
    )


def _react_rejection(config: Configuration, generator: Generator) -> Rejection | None:
    if (
        config.js_framework is JsFramework.REACT
        or config.js_template is JsTemplate.REACT
    ):
        return Rejection(
            "react-uses-dedicated-subgenerator",
            "React projects use a dedicated component subgenerator, so the "
            + f"{generator.value} subgenerator is not available",
        )
    return None


def _single_page_app_rules(
    config: Configuration, request: GenerationRequest,
) -> RuleResult:
    """Backbone-style view script, spec and optional template body."""
    react_rejection = _react_rejection(config, request.generator)
    if react_rejection is not None:
        return react_rejection

    notices: tuple[str, ...] = ()
    if request.view_type is not ViewType.PAGE:
        notices = (
            f'The type "{request.view_type.value}" is ignored for single page '
            + "applications",
        )

    selections = [_SPA_VIEW_SCRIPT, _SPA_VIEW_SPEC]
    body = _lookup(_SPA_TEMPLATE_BODIES, config.js_template, "spa template bodies")
    if body is not None:
        body_id, body_extension = body
        selections.append(TemplateSelection(body_id, "{root}/templates", body_extension))

    return RuleOutcome(selections=tuple(selections), notices=notices)


_STRUCTURE_RULES: dict[
    Structure, Callable[[Configuration, GenerationRequest], RuleResult]
] = {
    Structure.STATIC_SITE: _html_view_rules,
    Structure.SERVER_RENDERED: _html_view_rules,
    Structure.SINGLE_PAGE_APP: _single_page_app_rules,
}


def _factory_rules(config: Configuration, _request: GenerationRequest) -> RuleResult:
    if config.js_framework is not JsFramework.ANGULAR:
        return Rejection(
            "factory-requires-angular",
            "Factories are only generated for Angular applications "
            + f"(jsFramework is '{config.js_framework.value}')",
        )
    if config.use_testing:
        return RuleOutcome(selections=(_FACTORY_SCRIPT, _FACTORY_SPEC))
    return RuleOutcome(selections=(_FACTORY_SCRIPT,))


def _model_rules(config: Configuration, request: GenerationRequest) -> RuleResult:
    """Backbone model script, plus its spec when testing is enabled."""
    if config.structure is not Structure.SINGLE_PAGE_APP:
        return Rejection(
            "model-requires-single-page-app",
            "Models are only generated for single page applications "
            + f"(structure is '{config.structure.value}')",
        )
    react_rejection = _react_rejection(config, request.generator)
    if react_rejection is not None:
        return react_rejection
    if config.use_testing:
        return RuleOutcome(selections=(_MODEL_SCRIPT, _MODEL_SPEC))
    return RuleOutcome(selections=(_MODEL_SCRIPT,))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def select_templates(
    config: Configuration, request: GenerationRequest,
) -> RuleResult:
    """Decide the complete template selection for a request.

    Args:
        config: Loaded project configuration.
        request: The generation request.

    Returns:
        RuleOutcome with selections in emission order, or a Rejection.

    Raises:
        InternalInvariantViolation: If an option value has no rule.
    """
    name_rejection = check_name(request.name)
    if name_rejection is not None:
        return name_rejection

    if request.generator is Generator.FACTORY:
        return _factory_rules(config, request)
    if request.generator is Generator.MODEL:
        return _model_rules(config, request)
    if request.generator is Generator.VIEW:
        branch = _lookup(_STRUCTURE_RULES, config.structure, "structure rules")
        return branch(config, request)

    raise InternalInvariantViolation(f"No rules for generator {request.generator!r}")
