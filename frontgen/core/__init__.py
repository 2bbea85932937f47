"""Scaffolding decision core: configuration, rules, paths and manifests."""

from frontgen.core.configuration import Configuration, load
from frontgen.core.errors import ConfigError, InternalInvariantViolation, Rejection
from frontgen.core.manifest import ManifestEntry, OutputManifest
from frontgen.core.planner import GenerationPlan, plan
from frontgen.core.requests import GenerationRequest, Generator, ViewType, build_request

__all__ = [
    "ConfigError",
    "Configuration",
    "GenerationPlan",
    "GenerationRequest",
    "Generator",
    "InternalInvariantViolation",
    "ManifestEntry",
    "OutputManifest",
    "Rejection",
    "ViewType",
    "build_request",
    "load",
    "plan",
]
