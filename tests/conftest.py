"""Shared fixtures for the frontgen test suite.

Provides composable factories for configurations, requests and project
directories so individual test files don't build them inline.
"""

from __future__ import annotations

from collections.abc import Callable
from io import StringIO
from pathlib import Path
from typing import Any

import pytest
from ruamel.yaml import YAML

from frontgen.core.configuration import Configuration, load
from frontgen.core.errors import ConfigError, Rejection
from frontgen.core.requests import GenerationRequest, Generator, build_request

MakeConfig = Callable[..., Configuration]
MakeRequest = Callable[..., GenerationRequest]
MakeProjectDir = Callable[..., Path]

# Settings-file keys for a static Jade site; tests override what they need.
BASE_SETTINGS: dict[str, object] = {
    "projectName": "testing",
    "structure": "Static Site",
    "htmlOption": "Jade",
    "cssOption": "Sass",
    "extras": [],
    "ieSupport": True,
    "responsive": True,
    "useGA": True,
}


@pytest.fixture()
def make_config() -> MakeConfig:
    """Factory: ``make_config(structure="spa", jsTemplate="Jade")``."""

    def _make(**overrides: Any) -> Configuration:
        result = load({**BASE_SETTINGS, **overrides})
        assert not isinstance(result, ConfigError), str(result)
        return result

    return _make


@pytest.fixture()
def make_request() -> MakeRequest:
    """Factory: ``make_request("My Page", view_type="component")``."""

    def _make(
        name: str = "Main",
        generator: Generator = Generator.VIEW,
        **kwargs: Any,
    ) -> GenerationRequest:
        result = build_request(generator, name, **kwargs)
        assert not isinstance(result, Rejection), str(result)
        return result

    return _make


@pytest.fixture()
def make_project_dir(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
) -> MakeProjectDir:
    """Factory that writes ``.frontgen.yaml`` into tmp_path and cds into it."""

    def _make(settings_text: str | None = None, **overrides: Any) -> Path:
        settings_file = tmp_path / ".frontgen.yaml"
        if settings_text is None:
            settings = {**BASE_SETTINGS, **overrides}
            settings_text = _to_yaml(settings)
        settings_file.write_text(settings_text)
        monkeypatch.chdir(tmp_path)
        return tmp_path

    return _make


def _to_yaml(settings: dict[str, object]) -> str:
    stream = StringIO()
    YAML().dump({"config": settings}, stream)
    return stream.getvalue()
