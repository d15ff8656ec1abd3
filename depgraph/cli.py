"""Click CLI with scan and serve subcommands."""

from __future__ import annotations

import json
import logging
import socket
from pathlib import Path

import click

from depgraph import __version__
from depgraph.analysis.graph_models import NodeKind
from depgraph.errors import DepgraphError
from depgraph.models import ScanConfig, ScanResult
from depgraph.pipeline import run_scan
from depgraph.remote import is_remote_url

_source_dir_argument = click.argument(
    "source_dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
)


def _check_repo(ctx, param, value):
    if value is not None and not is_remote_url(value) and not Path(value).is_dir():
        raise click.BadParameter(f"{value!r} is neither a git URL nor a local repository")
    return value


def _scan_options(func):
    """Options shared by scan and serve."""
    func = click.option("--no-builtins", is_flag=True, help="Exclude Node.js built-in modules")(func)
    func = click.option("--no-packages", is_flag=True, help="Exclude npm package dependencies")(func)
    func = click.option("--ref", help="Branch or tag to clone with --repo")(func)
    func = click.option("--repo", "repo_url", callback=_check_repo, help="Git URL to clone and scan instead of SOURCE_DIR")(func)
    return func


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """depgraph: Visualize the import/require graph of a JS/TS project."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _build(
    source_dir: Path,
    repo_url: str | None,
    ref: str | None,
    no_packages: bool,
    no_builtins: bool,
) -> ScanResult:
    exclude: set[NodeKind] = set()
    if no_packages:
        exclude.add(NodeKind.PACKAGE)
    if no_builtins:
        exclude.add(NodeKind.BUILTIN)

    config = ScanConfig(
        source_dir=source_dir,
        repo_url=repo_url,
        repo_ref=ref,
        exclude_kinds=frozenset(exclude),
    )
    try:
        return run_scan(config)
    except DepgraphError as e:
        raise click.ClickException(str(e))


def _echo_summary(result: ScanResult) -> None:
    stats = result.stats
    click.echo(click.style("\ndepgraph", fg="cyan") + click.style(" — Dependency Graph Analyzer\n", dim=True))
    click.echo(f"  Scanning: {click.style(result.source, bold=True)}\n")
    click.echo(click.style(f"  Parsed in {result.elapsed_ms}ms", fg="green"))
    click.echo(f"  ├─ {click.style(str(stats.total_nodes), bold=True)} modules found")
    click.echo(f"  │  ├─ {click.style(str(stats.local_modules), fg='blue')} local files")
    click.echo(f"  │  ├─ {click.style(str(stats.packages), fg='yellow')} npm packages")
    click.echo(f"  │  └─ {click.style(str(stats.builtins), fg='magenta')} Node.js built-ins")
    click.echo(f"  └─ {click.style(str(stats.total_edges), bold=True)} import relationships\n")


def _warn_empty() -> None:
    click.echo(
        click.style(
            "  No source files found. Make sure the directory contains "
            ".ts, .tsx, .js, .jsx, or other source files.\n",
            fg="yellow",
        )
    )


@cli.command()
@_source_dir_argument
@_scan_options
@click.option("--json", "as_json", is_flag=True, help="Output graph data as JSON")
@click.option("-o", "--output", "output_file", type=click.Path(dir_okay=False, path_type=Path), help="Write JSON to a file")
def scan(
    source_dir: Path,
    repo_url: str | None,
    ref: str | None,
    no_packages: bool,
    no_builtins: bool,
    as_json: bool,
    output_file: Path | None,
):
    """Scan a directory and print graph statistics or JSON."""
    result = _build(source_dir, repo_url, ref, no_packages, no_builtins)
    payload = json.dumps(result.graph.to_dict(), indent=2)

    if output_file:
        output_file.write_text(payload + "\n", encoding="utf-8")
        _echo_summary(result)
        click.echo(f"  Wrote {output_file}")
        return

    if as_json:
        click.echo(payload)
        return

    _echo_summary(result)
    if not result.graph.nodes:
        _warn_empty()


def _port_in_use(host: str, port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        try:
            sock.bind((host, port))
        except OSError:
            return True
    return False


@cli.command()
@_source_dir_argument
@_scan_options
@click.option("--port", "-p", default=3000, type=click.IntRange(1, 65535), help="Port number")
@click.option("--host", default="127.0.0.1", help="Host address")
@click.option("--open/--no-open", "open_browser", default=True, help="Open browser automatically")
def serve(
    source_dir: Path,
    repo_url: str | None,
    ref: str | None,
    no_packages: bool,
    no_builtins: bool,
    port: int,
    host: str,
    open_browser: bool,
):
    """Scan a directory and serve the interactive graph."""
    result = _build(source_dir, repo_url, ref, no_packages, no_builtins)
    _echo_summary(result)

    if not result.graph.nodes:
        _warn_empty()
        return

    if _port_in_use(host, port):
        raise click.ClickException(f"Port {port} is already in use. Try a different port with --port")

    import uvicorn

    from depgraph.web import create_app

    url = f"http://{host}:{port}"
    click.echo(click.style(f"  Graph visualization running at {url}", fg="green"))
    click.echo(click.style("  Press Ctrl+C to stop\n", dim=True))

    if open_browser:
        import threading
        import webbrowser
        threading.Timer(1.0, lambda: webbrowser.open(url)).start()

    uvicorn.run(create_app(result), host=host, port=port, log_level="info")


if __name__ == "__main__":
    cli()
