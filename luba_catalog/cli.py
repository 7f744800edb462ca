"""Command line interface for querying the LubaUI catalog."""

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import click

from . import reference, tools
from .catalog_logging import LogCategory, get_category_logger, setup_logging
from .config import CatalogConfig, load_config
from .errors import CatalogError, ErrorCategory, MalformedInputError, handle_exception
from .models import TOKEN_CATEGORIES
from .output import OutputConfig, OutputManager
from .store import CatalogStore

logger = get_category_logger(LogCategory.CLI)

REFERENCE_SECTIONS: dict[str, Callable[[CatalogStore], Any]] = {
    "full": reference.full_reference,
    "architecture": lambda store: reference.architecture_overview(),
    "tokens": reference.all_tokens,
    "components": reference.component_directory,
}


@dataclass
class CliState:
    """Per-invocation state shared by all commands."""

    config: CatalogConfig
    output: OutputManager
    _store: CatalogStore | None = field(default=None, repr=False)

    @property
    def store(self) -> CatalogStore:
        if self._store is None:
            self._store = CatalogStore.load(self.config.data_dir)
        return self._store


def _fail(ctx: click.Context, error: Exception, output: OutputManager) -> None:
    message, exit_code = handle_exception(
        error,
        use_color=output.config.use_color,
        verbose=output.config.verbose,
    )
    output.error(message)
    ctx.exit(exit_code)


def _run(ctx: click.Context, operation: Callable[[CliState], dict[str, Any]]) -> None:
    """Run an operation, print its payload and set the exit code.

    Exit codes: 0 for results and no-match payloads, 2 for malformed
    input, 1 for any other failure.
    """
    state: CliState = ctx.obj
    try:
        payload = operation(state)
    except CatalogError as e:
        _fail(ctx, e, state.output)
        return

    state.output.payload(payload)
    error = payload.get("error")
    if error:
        malformed = error.get("category") == ErrorCategory.MALFORMED_INPUT.value
        ctx.exit(2 if malformed else 1)


def common_options(f: Any) -> Any:
    """Options shared by the group: config, verbosity and color."""
    f = click.option(
        "--no-color", is_flag=True, help="Disable colored error output"
    )(f)
    f = click.option(
        "--log-format",
        type=click.Choice(["text", "json"]),
        default=None,
        help="Log output format",
    )(f)
    f = click.option("--quiet", "-q", is_flag=True, help="Suppress non-error output")(f)
    f = click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")(f)
    f = click.option(
        "--data-dir",
        type=click.Path(exists=True, file_okay=False, path_type=Path),
        help="Directory holding tokens.json, components.json and primitives.json",
    )(f)
    f = click.option(
        "--config",
        "config_file",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="Configuration file path",
    )(f)
    return f


@click.group()
@click.version_option(version="1.0.0")
@common_options
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: Path | None,
    data_dir: Path | None,
    verbose: bool,
    quiet: bool,
    log_format: str | None,
    no_color: bool,
) -> None:
    """LubaUI catalog - design tokens, components and migration planning."""
    output = OutputManager(
        OutputConfig.from_flags(verbose=verbose, quiet=quiet, no_color=no_color)
    )
    try:
        config = load_config(config_file, data_dir=data_dir, log_format=log_format)
    except CatalogError as e:
        _fail(ctx, e, output)
        return

    setup_logging(
        level=config.log_level,
        quiet=quiet,
        verbose=verbose,
        log_file=config.log_file,
        log_format=config.log_format,
    )
    logger.debug(f"Using catalog at {config.data_dir or 'packaged data'}")
    ctx.obj = CliState(config=config, output=output)


@cli.command("lookup-token")
@click.argument("query")
@click.option(
    "--category",
    type=click.Choice(TOKEN_CATEGORIES),
    help="Filter by token category",
)
@click.pass_context
def lookup_token(ctx: click.Context, query: str, category: str | None) -> None:
    """Look up a design token by name or description.

    Examples:
        luba-catalog lookup-token "spacing large"
        luba-catalog lookup-token error --category color
    """
    _run(
        ctx,
        lambda s: tools.lookup_token(
            s.store, query, category, max_results=s.config.max_token_results
        ),
    )


@cli.command("lookup-component")
@click.argument("query")
@click.pass_context
def lookup_component(ctx: click.Context, query: str) -> None:
    """Look up a component by name, e.g. Button or toast."""
    _run(
        ctx,
        lambda s: tools.lookup_component(
            s.store, query, max_results=s.config.max_component_results
        ),
    )


@cli.command("lookup-primitive")
@click.argument("query")
@click.pass_context
def lookup_primitive(ctx: click.Context, query: str) -> None:
    """Look up an interaction primitive, e.g. pressable or glass."""
    _run(
        ctx,
        lambda s: tools.lookup_primitive(
            s.store, query, max_results=s.config.max_primitive_results
        ),
    )


@cli.command("validate-spacing")
@click.argument("value", type=float)
@click.pass_context
def validate_spacing(ctx: click.Context, value: float) -> None:
    """Check a spacing value against the 4pt grid and named tokens."""
    _run(ctx, lambda s: tools.validate_spacing(s.store, value))


@cli.command("validate-radius")
@click.argument("value", type=float)
@click.pass_context
def validate_radius(ctx: click.Context, value: float) -> None:
    """Check a corner radius against the radius scale."""
    _run(ctx, lambda s: tools.validate_radius(s.store, value))


@cli.command()
@click.argument("query")
@click.pass_context
def palette(ctx: click.Context, query: str) -> None:
    """Show a color group (accent, semantic, ...) or search colors."""
    _run(
        ctx,
        lambda s: tools.get_color_palette(
            s.store, query, max_results=s.config.max_color_results
        ),
    )


@cli.command()
@click.argument("description")
@click.pass_context
def suggest(ctx: click.Context, description: str) -> None:
    """Suggest tokens, components and primitives for a UI description.

    Examples:
        luba-catalog suggest "profile card"
        luba-catalog suggest "settings page with a list"
    """
    _run(
        ctx,
        lambda s: tools.suggest_tokens(
            s.store,
            description,
            max_components=s.config.max_suggested_components,
            max_primitives=s.config.max_suggested_primitives,
        ),
    )


def _read_request(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise MalformedInputError(
            f"Migration request is not valid JSON: {e}",
            details={"path": str(path)},
        ) from e
    if not isinstance(data, dict):
        raise MalformedInputError(
            "Migration request must be a JSON object",
            suggestion='Use {"colors": [...], "spacing": [...], ...}',
            details={"path": str(path)},
        )
    return data


@cli.command()
@click.argument("source_system")
@click.option(
    "--request",
    "request_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON file with colors, spacing, radii, typography and components arrays",
)
@click.pass_context
def migrate(ctx: click.Context, source_system: str, request_file: Path | None) -> None:
    """Plan a migration from SOURCE_SYSTEM onto LubaUI.

    Examples:
        luba-catalog migrate Material --request material-tokens.json
    """

    def operation(state: CliState) -> dict[str, Any]:
        request = _read_request(request_file) if request_file else {}
        return tools.plan_migration(
            state.store,
            source_system,
            colors=request.get("colors"),
            spacing=request.get("spacing"),
            radii=request.get("radii"),
            typography=request.get("typography"),
            components=request.get("components"),
        )

    _run(ctx, operation)


@cli.command("reference")
@click.option(
    "--section",
    type=click.Choice(list(REFERENCE_SECTIONS)),
    default="full",
    show_default=True,
    help="Part of the reference to export",
)
@click.pass_context
def reference_cmd(ctx: click.Context, section: str) -> None:
    """Export the catalog reference as JSON."""
    _run(ctx, lambda s: REFERENCE_SECTIONS[section](s.store))


@cli.command()
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    default="stdio",
    show_default=True,
    help="MCP transport to serve on",
)
@click.pass_context
def serve(ctx: click.Context, transport: str) -> None:
    """Run the MCP server."""
    from .server import run_server

    state: CliState = ctx.obj
    try:
        store = state.store
    except CatalogError as e:
        _fail(ctx, e, state.output)
        return
    state.output.status(f"Serving {state.config.server_name} over {transport}")
    run_server(store, state.config, transport=transport)


def main() -> None:
    """Console script entry point."""
    cli(prog_name="luba-catalog")


if __name__ == "__main__":
    main()
