"""Handlers behind ``frontgen generate`` and ``frontgen check-config``.

Exit codes:
    0 - success
    1 - request rejected
    2 - invalid project configuration
"""

from __future__ import annotations

import json
from pathlib import Path

from frontgen.core.configuration import KNOWN_EXTRAS, Configuration
from frontgen.core.errors import ConfigError, Rejection
from frontgen.core.planner import GenerationPlan, plan
from frontgen.core.requests import DEFAULT_FACTORY_DIRECTORY, Generator, build_request
from frontgen.helpers.helpers_logging import (
    print_created,
    print_error,
    print_header,
    print_info,
    print_notice,
    print_planned,
    print_rejection,
    print_skipped,
    print_success,
    print_warning,
)
from frontgen.helpers.project_config import (
    find_settings_file,
    get_project_root,
    load_project_config,
)
from frontgen.scaffolding import RenderContext, write_manifest

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_CONFIG_ERROR = 2


def _report_config_error(error: ConfigError) -> int:
    print_error(f"Invalid project configuration: {error}")
    print_info("Fix the settings file or pass --config PATH")
    return EXIT_CONFIG_ERROR


def _report_rejection(rejection: Rejection) -> int:
    print_rejection(rejection.message, rejection.reason)
    return EXIT_REJECTED


def _print_plan(result: GenerationPlan) -> None:
    print_header("Planned files:")
    for entry in result.manifest:
        print_planned(entry.output_path, entry.template_id)


def _print_plan_json(result: GenerationPlan) -> None:
    print(json.dumps(
        {
            "manifest": result.manifest.to_dict(),
            "notices": list(result.notices),
        },
        indent=2,
    ))


def run_generate(
    generator: Generator,
    name: str | None,
    view_type: str = "page",
    dashboard: bool = False,
    no_import: bool = False,
    use_template: bool = False,
    directory: str = DEFAULT_FACTORY_DIRECTORY,
    config_path: Path | None = None,
    dry_run: bool = False,
    as_json: bool = False,
    force: bool = False,
) -> int:
    """Plan a generation request and write (or print) its manifest."""
    settings_file = config_path or find_settings_file()
    config = load_project_config(settings_file)
    if isinstance(config, ConfigError):
        return _report_config_error(config)

    request = build_request(
        generator,
        name,
        view_type=view_type,
        dashboard=dashboard,
        no_import=no_import,
        use_template=use_template,
        directory=directory,
    )
    if isinstance(request, Rejection):
        return _report_rejection(request)

    result = plan(config, request)
    if isinstance(result, Rejection):
        return _report_rejection(result)

    if as_json:
        _print_plan_json(result)
        return EXIT_OK

    for notice in result.notices:
        print_notice(notice)

    if dry_run:
        _print_plan(result)
        return EXIT_OK

    project_root = get_project_root(settings_file)
    report = write_manifest(
        result.manifest,
        project_root,
        RenderContext.from_request(config, request),
        force=force,
    )
    for path in report.written:
        print_created(path)
    for path in report.skipped:
        print_skipped(path)
    return EXIT_OK


def _describe(config: Configuration) -> None:
    print_header(f"Project configuration: {config.project_name}")
    for key, value in config.to_dict().items():
        if isinstance(value, list):
            value = ", ".join(value) or "-"
        print_info(f"  {key}: {value}")


def run_check_config(config_path: Path | None = None) -> int:
    """Validate the settings file and print the resolved values."""
    settings_file = config_path or find_settings_file()
    config = load_project_config(settings_file)
    if isinstance(config, ConfigError):
        return _report_config_error(config)

    _describe(config)
    for extra in sorted(config.extras - KNOWN_EXTRAS):
        print_warning(f"Unknown extra '{extra}' has no effect")
    print_success("Configuration is valid")
    return EXIT_OK
