"""Resolve a request against a configuration into a generation plan."""

from __future__ import annotations

from dataclasses import dataclass

from frontgen.core.configuration import Configuration
from frontgen.core.errors import Rejection
from frontgen.core.manifest import OutputManifest, build
from frontgen.core.requests import GenerationRequest
from frontgen.core.rules import select_templates


@dataclass(frozen=True)
class GenerationPlan:
    """Manifest plus the non-fatal notices raised while deciding it."""

    manifest: OutputManifest
    notices: tuple[str, ...] = ()


def plan(config: Configuration, request: GenerationRequest) -> GenerationPlan | Rejection:
    """Run the rule engine to completion, then resolve paths.

    Pure: identical inputs always produce equal plans.
    """
    outcome = select_templates(config, request)
    if isinstance(outcome, Rejection):
        return outcome
    return GenerationPlan(
        manifest=build(outcome.selections, request, config),
        notices=outcome.notices,
    )
