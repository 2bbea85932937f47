"""Click command definitions.

Option parsing lives here; the work is done by the handlers in
``generate.py`` so they can be called without Click.
"""

from __future__ import annotations

from pathlib import Path

import click

from frontgen.cli.generate import run_check_config, run_generate
from frontgen.core.requests import DEFAULT_FACTORY_DIRECTORY, Generator

_CONFIG_OPTION = click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Settings file (default: nearest .frontgen.yaml)",
)
_DRY_RUN_OPTION = click.option(
    "--dry-run", is_flag=True, help="Print the planned files without writing",
)
_JSON_OPTION = click.option(
    "--json", "as_json", is_flag=True,
    help="Print the manifest as JSON without writing",
)
_FORCE_OPTION = click.option(
    "--force", is_flag=True, help="Overwrite files that already exist",
)


# ============================================================================
# generate
# ============================================================================

@click.group(name="generate", invoke_without_command=True)
@click.pass_context
def generate_cmd(ctx: click.Context) -> int:
    """Generate views, models and factories for the current project."""
    if ctx.invoked_subcommand is None:
        click.echo("❌ Missing subcommand for generate")
        click.echo("   Try: frontgen generate view mypage")
        return 1
    return 0


@generate_cmd.command(name="view", help="Generate a view")
@click.argument("name", required=False, default="")
@click.option("--type", "view_type", default="page", show_default=True,
              help="View type: page, component or template")
@click.option("--template", "use_template", is_flag=True,
              help="Build the page on the shared layout template")
@click.option("--no-import", is_flag=True,
              help="Do not add an import for the view")
@click.option("--dashboard", is_flag=True,
              help="Register the page on the dashboard")
@_CONFIG_OPTION
@_DRY_RUN_OPTION
@_JSON_OPTION
@_FORCE_OPTION
def generate_view_cmd(
    name: str,
    view_type: str,
    use_template: bool,
    no_import: bool,
    dashboard: bool,
    config_path: Path | None,
    dry_run: bool,
    as_json: bool,
    force: bool,
) -> int:
    """generate view."""
    return run_generate(
        Generator.VIEW,
        name,
        view_type=view_type,
        dashboard=dashboard,
        no_import=no_import,
        use_template=use_template,
        config_path=config_path,
        dry_run=dry_run,
        as_json=as_json,
        force=force,
    )


@generate_cmd.command(name="factory", help="Generate an Angular factory")
@click.argument("name", required=False, default="")
@click.option("--directory", default=DEFAULT_FACTORY_DIRECTORY, show_default=True,
              help="Directory the factory folder is created in")
@_CONFIG_OPTION
@_DRY_RUN_OPTION
@_JSON_OPTION
@_FORCE_OPTION
def generate_factory_cmd(
    name: str,
    directory: str,
    config_path: Path | None,
    dry_run: bool,
    as_json: bool,
    force: bool,
) -> int:
    """generate factory."""
    return run_generate(
        Generator.FACTORY,
        name,
        directory=directory,
        config_path=config_path,
        dry_run=dry_run,
        as_json=as_json,
        force=force,
    )


@generate_cmd.command(name="model", help="Generate a Backbone model")
@click.argument("name", required=False, default="")
@_CONFIG_OPTION
@_DRY_RUN_OPTION
@_JSON_OPTION
@_FORCE_OPTION
def generate_model_cmd(
    name: str,
    config_path: Path | None,
    dry_run: bool,
    as_json: bool,
    force: bool,
) -> int:
    """generate model."""
    return run_generate(
        Generator.MODEL,
        name,
        config_path=config_path,
        dry_run=dry_run,
        as_json=as_json,
        force=force,
    )


# ============================================================================
# check-config
# ============================================================================

@click.command(name="check-config", help="Validate the project settings file")
@_CONFIG_OPTION
def check_config_cmd(config_path: Path | None) -> int:
    """check-config."""
    return run_check_config(config_path)


# ============================================================================
# Registry of all typed commands
# ============================================================================

CLICK_COMMANDS: dict[str, click.Command] = {
    "generate": generate_cmd,
    "check-config": check_config_cmd,
}
