"""covkit CLI - covkit command."""

from pathlib import Path

import click

from covkit.cli.merge import merge_command
from covkit.cli.summary import summary_command
from covkit.cli.yui import yui_command
from covkit.config.loader import load_config
from covkit.core.errors import ConfigError
from covkit.core.logging import configure_logging, set_request_id


@click.group()
@click.version_option(version="0.1.0", prog_name="covkit")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML config file (default: .covkit.yaml in the current directory)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """covkit - summarize, merge and convert Istanbul coverage data."""
    try:
        config = load_config(config_path=config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    if verbose:
        config.logging.level = "DEBUG"
    configure_logging(config=config.logging)
    set_request_id()

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = config


cli.add_command(summary_command, name="summary")
cli.add_command(merge_command, name="merge")
cli.add_command(yui_command, name="yui")


if __name__ == "__main__":
    cli()
