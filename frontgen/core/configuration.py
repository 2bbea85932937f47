"""Project configuration model.

Validates the persisted project settings into an immutable ``Configuration``.
Every enum-valued key is matched against an alias table so that the labels
stored by the interactive prompt and the canonical kebab-case values both
resolve. Unknown keys are ignored; unrecognized values are errors.

Example .frontgen.yaml:
    config:
      projectName: Acme Site
      structure: Single Page Application
      jsFramework: Backbone
      jsTemplate: Handlebars
      cssOption: Sass
      extras: [useDashboard, useModernizr]
      useTesting: true
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TypeVar

from ruamel.yaml.scalarbool import ScalarBoolean

from frontgen.core.errors import ConfigError
from frontgen.core.requests import normalize_directory

# ---------------------------------------------------------------------------
# Option enums
# ---------------------------------------------------------------------------


class Structure(str, Enum):
    STATIC_SITE = "static-site"
    SINGLE_PAGE_APP = "single-page-app"
    SERVER_RENDERED = "server-rendered"


class JsFramework(str, Enum):
    NONE = "none"
    ANGULAR = "angular"
    BACKBONE = "backbone"
    REACT = "react"


class JsTemplate(str, Enum):
    NONE = "none"
    UNDERSCORE = "underscore"
    HANDLEBARS = "handlebars"
    JADE = "jade"
    REACT = "react"


class HtmlOption(str, Enum):
    JADE = "jade"
    SWIG = "swig"
    VANILLA = "vanilla"


class CssOption(str, Enum):
    SASS = "sass"
    LESS = "less"
    PLAIN = "plain"


class JsOption(str, Enum):
    NONE = "none"
    BROWSERIFY = "browserify"
    REQUIREJS = "requirejs"


class TestFramework(str, Enum):
    __test__ = False  # not a pytest class

    MOCHA = "mocha"
    JASMINE = "jasmine"


# Prompt labels and shorthands, lower-cased. Canonical values always match.
_ALIASES: dict[type[Enum], dict[str, Enum]] = {
    Structure: {
        "static site": Structure.STATIC_SITE,
        "static": Structure.STATIC_SITE,
        "single page application": Structure.SINGLE_PAGE_APP,
        "single page app": Structure.SINGLE_PAGE_APP,
        "spa": Structure.SINGLE_PAGE_APP,
        "server rendered": Structure.SERVER_RENDERED,
        "server": Structure.SERVER_RENDERED,
    },
    JsFramework: {},
    JsTemplate: {
        "lo-dash (underscore)": JsTemplate.UNDERSCORE,
        "lodash": JsTemplate.UNDERSCORE,
        "lo-dash": JsTemplate.UNDERSCORE,
    },
    HtmlOption: {
        "none (vanilla html)": HtmlOption.VANILLA,
        "html": HtmlOption.VANILLA,
        "none": HtmlOption.VANILLA,
    },
    CssOption: {
        "none": CssOption.PLAIN,
        "css": CssOption.PLAIN,
        "none (vanilla css)": CssOption.PLAIN,
        "scss": CssOption.SASS,
    },
    JsOption: {},
    TestFramework: {},
}

KNOWN_EXTRAS = frozenset({
    "useDashboard",
    "useBootstrap",
    "useModernizr",
    "useFontAwesome",
    "useBorderBox",
    "useKss",
    "htaccess",
})

_DEFAULT_ROOTS: dict[Structure, str] = {
    Structure.STATIC_SITE: "client",
    Structure.SINGLE_PAGE_APP: "client",
    Structure.SERVER_RENDERED: "server",
}

E = TypeVar("E", bound=Enum)


# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Configuration:
    """Immutable project settings, shared by every generation request.

    Attributes:
        project_name: Human-readable project name.
        structure: Top-level project architecture.
        js_framework: Client-side framework.
        js_template: JS-side templating language (distinct from html_option).
        html_option: HTML templating language for pages.
        css_option: Style preprocessor.
        js_option: Module loader.
        test_framework: Framework used by generated spec files.
        use_testing: Whether paired spec files are generated where optional.
        extras: Enabled feature toggles.
        ie_support: Legacy Internet Explorer support.
        responsive: Responsive layout.
        use_ga: Google Analytics snippet.
        root_override: Replaces the structure-dependent root when set.
    """

    project_name: str
    structure: Structure
    js_framework: JsFramework = JsFramework.NONE
    js_template: JsTemplate = JsTemplate.NONE
    html_option: HtmlOption = HtmlOption.VANILLA
    css_option: CssOption = CssOption.PLAIN
    js_option: JsOption = JsOption.NONE
    test_framework: TestFramework = TestFramework.MOCHA
    use_testing: bool = False
    extras: frozenset[str] = field(default_factory=frozenset)
    ie_support: bool = False
    responsive: bool = False
    use_ga: bool = False
    root_override: str | None = None

    def has_extra(self, name: str) -> bool:
        """Return True if the feature toggle is enabled."""
        return name in self.extras

    @property
    def use_dashboard(self) -> bool:
        return self.has_extra("useDashboard")

    @property
    def use_bootstrap(self) -> bool:
        return self.has_extra("useBootstrap")

    @property
    def use_modernizr(self) -> bool:
        return self.has_extra("useModernizr")

    @property
    def root_dir(self) -> str:
        """Directory that holds client-facing sources for this structure."""
        if self.root_override:
            return self.root_override
        return _DEFAULT_ROOTS[self.structure]

    def to_dict(self) -> dict[str, object]:
        """Serialize back to settings-file keys with canonical values."""
        return {
            "projectName": self.project_name,
            "structure": self.structure.value,
            "jsFramework": self.js_framework.value,
            "jsTemplate": self.js_template.value,
            "htmlOption": self.html_option.value,
            "cssOption": self.css_option.value,
            "jsOption": self.js_option.value,
            "testFramework": self.test_framework.value,
            "useTesting": self.use_testing,
            "extras": sorted(self.extras),
            "ieSupport": self.ie_support,
            "responsive": self.responsive,
            "useGA": self.use_ga,
            "rootDir": self.root_dir,
        }


# ---------------------------------------------------------------------------
# Parsing & validation
# ---------------------------------------------------------------------------


class _FieldError(Exception):
    """Internal control flow for ``load``; never escapes this module."""

    def __init__(self, error: ConfigError) -> None:
        super().__init__(str(error))
        self.error = error


def parse_enum(enum_cls: type[E], raw: str) -> E | None:
    """Match a raw settings value against an enum and its aliases.

    Args:
        enum_cls: Target enum class.
        raw: Value as stored in the settings file.

    Returns:
        The enum member, or None if the value is not recognized.
    """
    normalized = raw.strip().lower()
    for member in enum_cls:
        if member.value == normalized:
            return member
    alias = _ALIASES.get(enum_cls, {}).get(normalized)
    if alias is None:
        return None
    return alias  # type: ignore[return-value]


def _allowed_values(enum_cls: type[Enum]) -> str:
    return ", ".join(member.value for member in enum_cls)


def _enum_field(
    raw: Mapping[str, object],
    key: str,
    enum_cls: type[E],
    default: E | None = None,
) -> E:
    value = raw.get(key)
    if value is None:
        if default is None:
            raise _FieldError(ConfigError(key, "required key is missing"))
        return default
    if not isinstance(value, str):
        raise _FieldError(ConfigError(
            key, f"expected a string, got {type(value).__name__}",
        ))
    member = parse_enum(enum_cls, value)
    if member is None:
        raise _FieldError(ConfigError(
            key,
            f"unrecognized value '{value}' (allowed: {_allowed_values(enum_cls)})",
        ))
    return member


def _bool_field(raw: Mapping[str, object], key: str) -> bool:
    value = raw.get(key)
    if value is None:
        return False
    # anchored or aliased YAML booleans load as ScalarBoolean
    if isinstance(value, ScalarBoolean):
        return bool(value)
    if not isinstance(value, bool):
        raise _FieldError(ConfigError(
            key, f"expected a boolean, got {type(value).__name__}",
        ))
    return value


def _extras_field(raw: Mapping[str, object]) -> frozenset[str]:
    value = raw.get("extras")
    if value is None:
        return frozenset()
    if not isinstance(value, list):
        raise _FieldError(ConfigError(
            "extras", f"expected a list, got {type(value).__name__}",
        ))
    extras: set[str] = set()
    for item in value:
        if not isinstance(item, str):
            raise _FieldError(ConfigError(
                "extras", f"entries must be strings, got {type(item).__name__}",
            ))
        extras.add(item)
    return frozenset(extras)


def _project_name_field(raw: Mapping[str, object]) -> str:
    value = raw.get("projectName")
    if value is None:
        raise _FieldError(ConfigError("projectName", "required key is missing"))
    if not isinstance(value, str):
        raise _FieldError(ConfigError(
            "projectName", f"expected a string, got {type(value).__name__}",
        ))
    if not value.strip():
        raise _FieldError(ConfigError("projectName", "cannot be empty"))
    return str(value).strip()


def _root_dir_field(raw: Mapping[str, object]) -> str | None:
    value = raw.get("rootDir")
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise _FieldError(ConfigError("rootDir", "expected a non-empty string"))
    normalized = normalize_directory(value)
    if normalized is None:
        raise _FieldError(ConfigError(
            "rootDir", f"'{value}' must be a relative path inside the project",
        ))
    return normalized


def load(raw: object) -> Configuration | ConfigError:
    """Validate raw settings into a Configuration.

    Accepts the settings mapping bare or wrapped in a top-level ``config``
    key. Fields are checked in declaration order and the first failure is
    returned.

    Args:
        raw: Parsed settings document.

    Returns:
        Configuration on success, ConfigError describing the first problem
        otherwise.
    """
    if not isinstance(raw, Mapping):
        return ConfigError("<root>", "settings must be a mapping")
    wrapped = raw.get("config")
    if isinstance(wrapped, Mapping):
        raw = wrapped

    try:
        return Configuration(
            project_name=_project_name_field(raw),
            structure=_enum_field(raw, "structure", Structure),
            js_framework=_enum_field(raw, "jsFramework", JsFramework, JsFramework.NONE),
            js_template=_enum_field(raw, "jsTemplate", JsTemplate, JsTemplate.NONE),
            html_option=_enum_field(raw, "htmlOption", HtmlOption, HtmlOption.VANILLA),
            css_option=_enum_field(raw, "cssOption", CssOption, CssOption.PLAIN),
            js_option=_enum_field(raw, "jsOption", JsOption, JsOption.NONE),
            test_framework=_enum_field(
                raw, "testFramework", TestFramework, TestFramework.MOCHA,
            ),
            use_testing=_bool_field(raw, "useTesting"),
            extras=_extras_field(raw),
            ie_support=_bool_field(raw, "ieSupport"),
            responsive=_bool_field(raw, "responsive"),
            use_ga=_bool_field(raw, "useGA"),
            root_override=_root_dir_field(raw),
        )
    except _FieldError as exc:
        return exc.error
