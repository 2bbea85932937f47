#!/usr/bin/env python3
"""frontgen CLI - Main Entry Point.

Usage:
    frontgen <command> [options]

Commands:
    generate view NAME     Generate a page, component or template view
    generate factory NAME  Generate an Angular factory
    generate model NAME    Generate a Backbone model (single page apps)
    check-config           Validate the project settings file
    help                   Show this help message
"""

from __future__ import annotations

import sys

import click

from frontgen import __version__


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="frontgen")
@click.pass_context
def _click_cli(ctx: click.Context) -> int:
    """Scaffold views, models and factories for a front-end project."""
    if ctx.invoked_subcommand is not None:
        return 0
    click.echo(ctx.get_help())
    return 0


def _register_commands() -> None:
    """Register all top-level commands in the click app."""
    from frontgen.cli.click_commands import CLICK_COMMANDS

    for _name, cmd_obj in CLICK_COMMANDS.items():
        _click_cli.add_command(cmd_obj)

    @click.command(name="help", help="Show help message")
    @click.pass_context
    def _help_cmd(ctx: click.Context) -> int:
        parent = ctx.parent
        click.echo(parent.get_help() if parent is not None else ctx.get_help())
        return 0

    _click_cli.add_command(_help_cmd)


_register_commands()


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = sys.argv[1:] if argv is None else argv

    try:
        result = _click_cli.main(
            args=args,
            prog_name="frontgen",
            standalone_mode=False,
        )
    except click.Abort:
        print("\n⚠️  Cancelled by user")
        return 130
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    return 0 if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())
