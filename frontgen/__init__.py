"""
frontgen

A scaffolding tool for front-end projects: decides which view and factory
files a request produces, then renders and writes them.
"""

__version__ = "0.1.0"

from frontgen.core import (
    ConfigError,
    Configuration,
    GenerationPlan,
    GenerationRequest,
    OutputManifest,
    Rejection,
    build_request,
    load,
    plan,
)

__all__ = [
    "ConfigError",
    "Configuration",
    "GenerationPlan",
    "GenerationRequest",
    "OutputManifest",
    "Rejection",
    "build_request",
    "load",
    "plan",
]
