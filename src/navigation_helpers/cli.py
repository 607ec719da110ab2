"""CLI for the navigation helpers (active page, breadcrumbs)."""

import json
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from navigation_helpers.config import UNBOUNDED_DEPTH, resolve_navigation_file
from navigation_helpers.core.accept import AcceptHelper
from navigation_helpers.core.container_parser import ContainerParser
from navigation_helpers.core.importer.json_reader import load_registry, parse_roles_file
from navigation_helpers.core.tree.active import ActiveFinder
from navigation_helpers.core.tree.breadcrumbs import trail
from navigation_helpers.errors import NavigationError
from navigation_helpers.logging_config import configure_logging
from navigation_helpers.protocols import ContainerProtocol

app = typer.Typer(help="Navigation helpers: find the active page and its breadcrumbs.")

FileArg = Annotated[
    Path | None,
    typer.Argument(help="Navigation JSON file (default: first existing navigation.json)"),
]
ContainerOpt = Annotated[
    str, typer.Option("--container", "-c", help="Name of the container in the file")
]
MinDepthOpt = Annotated[int, typer.Option("--min-depth", help="Minimum depth of the active page")]
MaxDepthOpt = Annotated[
    int, typer.Option("--max-depth", help="Maximum depth to search (negative: unbounded)")
]
RoleOpt = Annotated[str | None, typer.Option("--role", "-r", help="Role to authorize pages for")]
AclOpt = Annotated[Path | None, typer.Option("--acl", help="JSON file with role definitions")]
InvisibleOpt = Annotated[
    bool, typer.Option("--render-invisible", help="Also consider invisible pages")
]
JsonOpt = Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")]


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    log_level: Annotated[
        str | None, typer.Option("--log-level", help="Log level name, e.g. WARNING")
    ] = None,
) -> None:
    configure_logging(verbose=verbose, level=log_level.upper() if log_level else None)


def _load(
    file: Path | None,
    container: str,
    *,
    role: str | None,
    acl: Path | None,
    render_invisible: bool,
) -> tuple[ContainerProtocol, ActiveFinder]:
    """Load the navigation container and build a finder for it, exiting on errors."""
    path = file or resolve_navigation_file()
    if path is None:
        logger.error("No navigation file given and none found")
        raise typer.Exit(1)

    try:
        registry = load_registry(path)
        nav = ContainerParser(registry).parse(container)
        authorization = parse_roles_file(acl) if acl else None
    except (OSError, NavigationError) as e:
        logger.error("Cannot load navigation: {}", e)
        raise typer.Exit(1) from e

    acceptor = AcceptHelper(authorization, render_invisible=render_invisible, role=role)
    return nav, ActiveFinder(acceptor)


@app.command()
def active(
    file: FileArg = None,
    container: ContainerOpt = "default",
    min_depth: MinDepthOpt = 0,
    max_depth: MaxDepthOpt = UNBOUNDED_DEPTH,
    role: RoleOpt = None,
    acl: AclOpt = None,
    render_invisible: InvisibleOpt = False,
    output_json: JsonOpt = False,
) -> None:
    """Show the deepest active page."""
    nav, finder = _load(file, container, role=role, acl=acl, render_invisible=render_invisible)
    found = finder.find(nav, min_depth, max_depth)

    if output_json:
        data = None
        if found is not None:
            data = {"label": found.page.label, "uri": found.page.uri, "depth": found.depth}
        typer.echo(json.dumps({"active": data}, indent=2))
    elif found is None:
        typer.echo("No active page.")
    else:
        typer.echo(f"{found.page.label} ({found.page.uri})  depth={found.depth}")


@app.command()
def breadcrumbs(
    file: FileArg = None,
    container: ContainerOpt = "default",
    min_depth: MinDepthOpt = 0,
    max_depth: MaxDepthOpt = UNBOUNDED_DEPTH,
    role: RoleOpt = None,
    acl: AclOpt = None,
    render_invisible: InvisibleOpt = False,
    separator: str = typer.Option(" > ", "--separator", "-s", help="Separator between pages"),
    output_json: JsonOpt = False,
) -> None:
    """Show the breadcrumb trail down to the active page."""
    nav, finder = _load(file, container, role=role, acl=acl, render_invisible=render_invisible)
    found = finder.find(nav, min_depth, max_depth)
    pages = trail(found.page, nav) if found is not None else ()

    if output_json:
        data = {"trail": [{"label": p.label, "uri": p.uri} for p in pages]}
        typer.echo(json.dumps(data, indent=2))
    elif not pages:
        typer.echo("No active page.")
    else:
        typer.echo(separator.join(p.label for p in pages))
