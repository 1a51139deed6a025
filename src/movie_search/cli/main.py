"""Main CLI entry point."""

import asyncio
import sys
from pathlib import Path
from typing import Optional

import click

from .. import __version__
from ..config import Config, ConfigManager
from ..core.models import SearchResults, SearchState
from ..core.services import SearchStore
from ..infrastructure import Container, setup_logging
from ..presentation import build_detail, render_detail, render_state
from ..presentation.views import SCREEN_TITLE
from ..utils import ConfigurationError, MovieSearchError


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.version_option(version=__version__, prog_name="movie-search")
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], verbose: bool) -> None:
    """Movie Search - find movies on TMDb and show their details."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config

    # Skip configuration loading for commands that don't need it
    if ctx.invoked_subcommand == "init":
        return

    try:
        config_manager = ConfigManager(config)
        app_config = config_manager.load_config()

        if verbose:
            app_config.logging.level = "DEBUG"
        setup_logging(app_config.logging)

        container = Container(config_manager)
        container.configure_default_services()

        ctx.obj["config"] = app_config
        ctx.obj["container"] = container

    except (ConfigurationError, FileNotFoundError, ValueError) as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"Initialization error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("query", required=False, default="")
@click.option("--select", "-s", type=int, help="Show details of the result at this position")
@click.option("--json", "as_json", is_flag=True, help="Print the decoded records as JSON")
@click.pass_context
def search(ctx: click.Context, query: str, select: Optional[int], as_json: bool) -> None:
    """Search movies by title and list the matches."""
    config = ctx.obj["config"]
    container = ctx.obj["container"]

    try:
        state = asyncio.run(_run_search(container, query))
    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user.")
        sys.exit(1)
    except MovieSearchError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(SearchResults(results=list(state.results)).model_dump_json(indent=2))
    else:
        click.echo(render_state(state, config.tmdb.image_base_url))

    if state.error_message is not None:
        sys.exit(1)

    if select is not None:
        if not 1 <= select <= len(state.results):
            click.echo(f"No result at position {select}", err=True)
            sys.exit(1)
        record = state.results[select - 1]
        click.echo("")
        click.echo(render_detail(build_detail(record, config.tmdb.image_base_url)))


@cli.command()
@click.pass_context
def interactive(ctx: click.Context) -> None:
    """Search repeatedly and open the details of any result."""
    config = ctx.obj["config"]
    container = ctx.obj["container"]

    try:
        asyncio.run(_run_interactive(container, config))
    except (KeyboardInterrupt, click.Abort):
        click.echo("")
    except MovieSearchError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=Path.cwd() / "config" / "config.yaml",
    help="Output path for configuration file",
)
def init(output: Path) -> None:
    """Initialize configuration file."""
    try:
        if output.exists():
            if not click.confirm(f"Configuration file {output} already exists. Overwrite?"):
                return

        output.parent.mkdir(parents=True, exist_ok=True)

        ConfigManager.create_default_config(output)
        click.echo(f"Configuration file created at: {output}")
        click.echo("Set TMDB_API_KEY in your environment or a .env file.")

    except Exception as e:
        click.echo(f"Failed to create configuration: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show configuration status."""
    config = ctx.obj["config"]

    click.echo("Movie Search Status")
    click.echo("=" * 40)
    click.echo(f"TMDb API: {config.tmdb.base_url}")
    click.echo(f"TMDb Configured: {'✓' if config.tmdb.api_key else '✗'}")
    click.echo(f"Images: {config.tmdb.image_base_url}")
    click.echo(f"Language: {config.tmdb.language}")
    click.echo(f"Adult Titles: {'✓' if config.tmdb.include_adult else '✗'}")
    click.echo(f"Timeout: {config.tmdb.timeout or 'transport default'}")


async def _run_search(container: Container, query: str) -> SearchState:
    """Run one search and return the resulting state."""
    try:
        store = container.get(SearchStore)
        await store.search(query)
        return store.state
    finally:
        await container.close()


async def _run_interactive(container: Container, config: Config) -> None:
    """Run the interactive search loop."""
    image_base_url = config.tmdb.image_base_url
    store = container.get(SearchStore)

    click.echo(SCREEN_TITLE)
    click.echo("=" * len(SCREEN_TITLE))

    try:
        while True:
            query = click.prompt("Movie title", default="", show_default=False)
            store.set_query(query)
            await store.search()

            click.echo("")
            click.echo(render_state(store.state, image_base_url))
            click.echo("")

            while store.state.results:
                choice = click.prompt(
                    "Open details for # (Enter to search again)",
                    default="",
                    show_default=False,
                )
                if not choice.strip():
                    break
                if not choice.strip().isdigit() or not (
                    1 <= int(choice) <= len(store.state.results)
                ):
                    click.echo(f"Pick a number between 1 and {len(store.state.results)}")
                    continue

                record = store.select(store.state.results[int(choice) - 1].id)
                if record is None:
                    continue
                click.echo("")
                click.echo(render_detail(build_detail(record, image_base_url)))
                click.echo("")
                click.prompt("Press Enter to close", default="", show_default=False)
                store.close_detail()
    finally:
        await container.close()


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
