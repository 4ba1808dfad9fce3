"""CLI for resolving password arguments."""

from typing import Optional

import click
import yaml
from dotenv import find_dotenv, load_dotenv

from passarg.config import ConfigError, ConfigLoader
from passarg.exceptions import PassArgError
from passarg.params import PASSARG
from passarg.resolver import PassArgResolver
from passarg.utils.logging import setup_logging

# .env in the working directory feeds env: sources
load_dotenv(find_dotenv(usecwd=True))


@click.group()
@click.version_option(version="1.0.0", prog_name="passarg")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level (logs go to stderr)",
)
@click.option("--log-format", default="standard", type=click.Choice(["standard", "json"]))
@click.option(
    "--log-file",
    default=None,
    type=click.Path(dir_okay=False),
    help="Also write logs to this file",
)
def cli(log_level: str, log_format: str, log_file: Optional[str]):
    """Resolve OpenSSL-style password arguments (pass:, env:, file:, fd:, stdin, prompt)."""
    setup_logging(level=log_level, format_style=log_format, log_file=log_file)


@cli.command()
@click.argument("sources", nargs=-1, required=True, type=PASSARG)
def resolve(sources):
    """
    Resolve each argument in order and print one secret per line.

    Arguments naming the same file, descriptor or stdin read successive lines.
    """
    try:
        with PassArgResolver() as resolver:
            secrets = [resolver.resolve(source) for source in sources]
    except PassArgError as e:
        raise click.ClickException(str(e)) from e

    for secret in secrets:
        click.echo(secret)


@cli.command()
@click.argument("source", type=PASSARG)
def parse(source):
    """Show how an argument is parsed, without reading it."""
    click.echo(f"Type: {type(source).__name__}")
    click.echo(f"Canonical: {source.to_arg()}")


@cli.command()
@click.argument("path", type=click.Path(dir_okay=False))
def config(path: str):
    """Load a YAML file and print it with ${passarg:...} values resolved."""
    loader = ConfigLoader()
    try:
        with loader.resolver:
            cfg = loader.load(path)
    except (ConfigError, PassArgError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(yaml.safe_dump(cfg, sort_keys=False), nl=False)


if __name__ == "__main__":
    cli()
