"""
gotth — CLI entrypoint.

Usage:
    gotth --help
    gotth init
    gotth dev
    gotth build
"""

from __future__ import annotations

import contextlib
import json
import os
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING

import click

from gotth import __version__
from gotth.core.observability.logging_config import setup_logging

if TYPE_CHECKING:
    from gotth.core.models.project import ProjectSettings

CHECK = "✓"
ARROW = "→"

_COMMAND_SUMMARY = (
    ("dev", "Start Air server + Tailwind watch"),
    ("build", "Build binary"),
    ("init", "Setup project (checks deps, creates config, init go mod)"),
    ("clean", "Remove temp files"),
    ("generate", "Run templ generate"),
    ("css", "Build minified CSS"),
    ("deps", "Check and install required tools"),
    ("setup-go", "Initialize the Go module"),
    ("air-config", "Create or repair .air.toml"),
)


@click.group()
@click.version_option(version=__version__, prog_name="gotth")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to gotth.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """gotth — bootstrap and run a Go + templ + Tailwind project."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # Register project root in core context
    from gotth.core.config.loader import find_project_file, project_root
    from gotth.core.context import set_project_root as _set_ctx_root
    _cfg = ctx.obj["config_path"] or find_project_file()
    ctx.obj["config_path"] = _cfg
    _set_ctx_root(project_root(_cfg))

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("GOTTH_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("GOTTH_LOG_FILE"),
        log_file_level=os.environ.get("GOTTH_LOG_FILE_LEVEL"),
    )


# ── Helpers ─────────────────────────────────────────────────────


def _root() -> Path:
    from gotth.core.context import get_project_root

    return get_project_root() or Path.cwd().resolve()


def _settings(ctx: click.Context) -> ProjectSettings:
    """Load ProjectSettings once per invocation."""
    if "settings" not in ctx.obj:
        from gotth.core.config.loader import load_settings

        ctx.obj["settings"] = load_settings(_root(), ctx.obj.get("config_path"))
    return ctx.obj["settings"]


def _notifier(ctx: click.Context):
    quiet = ctx.obj.get("quiet", False)

    def notify(message: str, kind: str = "info") -> None:
        if quiet:
            return
        if kind == "section":
            click.secho(f"\n{message}", fg="cyan")
        elif kind == "done":
            click.echo(f"{CHECK} {message}")
        else:
            click.echo(message)

    return notify


def _confirm(prompt: str) -> bool:
    return click.confirm(prompt, default=False)


@contextlib.contextmanager
def _fatal_errors() -> Iterator[None]:
    """Turn any domain error into one red line and exit 1."""
    from gotth.core.config.loader import ConfigError
    from gotth.core.errors import GotthError

    try:
        yield
    except (GotthError, ConfigError) as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)


# ── Main development ────────────────────────────────────────────


@cli.command()
@click.pass_context
def dev(ctx: click.Context) -> None:
    """Start the Tailwind watcher and the air live-reload server."""
    from gotth.core.use_cases.dev import run_dev

    with _fatal_errors():
        code = run_dev(
            _root(),
            _settings(ctx),
            confirm=_confirm,
            notify=_notifier(ctx),
        )
    sys.exit(code)


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def build(ctx: click.Context, as_json: bool) -> None:
    """Build the release binary (templ, minified CSS, go build)."""
    from gotth.core.services.tool_resolver import resolve_tools
    from gotth.core.use_cases.build import run_build

    with _fatal_errors():
        result = run_build(
            _root(),
            _settings(ctx),
            resolve_tools(),
            notify=_notifier(ctx) if not as_json else _silent,
        )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))


@cli.command()
@click.option("--skip-assets", is_flag=True, help="Don't download Alpine.js.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def init(ctx: click.Context, skip_assets: bool, as_json: bool) -> None:
    """Bootstrap the project: tools, layout, go.mod, Tailwind, .air.toml."""
    from gotth.core.use_cases.init import run_init

    with _fatal_errors():
        result = run_init(
            _root(),
            _settings(ctx),
            confirm=_confirm,
            notify=_notifier(ctx) if not as_json else _silent,
            skip_assets=skip_assets,
        )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    if not ctx.obj.get("quiet"):
        click.secho(f"\n{CHECK} Project initialized successfully!", fg="green")


@cli.command()
@click.pass_context
def clean(ctx: click.Context) -> None:
    """Remove build output and generated *_templ.go files."""
    from gotth.core.services.clean import clean_project

    with _fatal_errors():
        removed = clean_project(_root(), _settings(ctx))

    if ctx.obj.get("verbose"):
        for path in removed:
            click.echo(f"   - {path}")
    if not ctx.obj.get("quiet"):
        click.echo(f"{CHECK} Clean complete")


@cli.command("help")
def help_() -> None:
    """List available commands."""
    click.secho("\nAvailable commands", fg="cyan")
    width = max(len(name) for name, _ in _COMMAND_SUMMARY)
    for name, summary in _COMMAND_SUMMARY:
        click.echo(f"  gotth {name:<{width}}  {ARROW} {summary}")


# ── Generators ──────────────────────────────────────────────────


@cli.command()
@click.pass_context
def generate(ctx: click.Context) -> None:
    """Run templ generate."""
    from gotth.core.services.build_steps import generate_templates
    from gotth.core.services.tool_resolver import resolve_tools

    with _fatal_errors():
        generate_templates(_root(), resolve_tools())


@cli.command()
@click.pass_context
def css(ctx: click.Context) -> None:
    """Build the minified stylesheet once."""
    from gotth.core.services.build_steps import build_css
    from gotth.core.services.tool_install import ensure_tailwind
    from gotth.core.services.tool_resolver import resolve_tools

    root = _root()
    with _fatal_errors():
        settings = _settings(ctx)
        tools = resolve_tools()
        ensure_tailwind(root, tools)
        build_css(root, settings, tools)


# ── Setup & helpers ─────────────────────────────────────────────


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True,
              help="Print resolved tools as JSON without installing anything.")
@click.pass_context
def deps(ctx: click.Context, as_json: bool) -> None:
    """Check required tools, offering to install missing ones."""
    from gotth.core.services.tool_resolver import resolve_tools
    from gotth.core.use_cases.deps import check_deps

    if as_json:
        tools = resolve_tools()
        click.echo(json.dumps({tid: t.to_dict() for tid, t in tools.items()}, indent=2))
        return

    with _fatal_errors():
        tools = check_deps(confirm=_confirm, notify=_notifier(ctx))

    if ctx.obj.get("verbose"):
        for ref in tools.values():
            click.echo(f"   {ref.label:<10} {ARROW} {ref.command}")


@cli.command("setup-go")
@click.pass_context
def setup_go(ctx: click.Context) -> None:
    """Initialize go.mod and fetch templ."""
    from gotth.core.services.go_module import setup_go_module
    from gotth.core.services.tool_resolver import resolve_tools

    notify = _notifier(ctx)
    with _fatal_errors():
        notify("Initializing Go Module", "section")
        setup_go_module(_root(), _settings(ctx), resolve_tools())
        notify("Go module initialized", "done")


@cli.command("air-config")
@click.option("--force", is_flag=True, help="Rewrite even if the file looks current.")
@click.pass_context
def air_config(ctx: click.Context, force: bool) -> None:
    """Create .air.toml, or regenerate it if the serve command is missing."""
    from gotth.core.services.generators.air_config import ensure_air_config

    with _fatal_errors():
        written = ensure_air_config(_root(), _settings(ctx), force=force)

    if ctx.obj.get("quiet"):
        return
    if written:
        click.echo(f"{CHECK} .air.toml configured")
    else:
        click.echo(f"{CHECK} .air.toml already up to date")


def _silent(message: str, kind: str = "info") -> None:
    pass


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
