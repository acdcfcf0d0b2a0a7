"""Entrypoint for the command line interface."""

from typing import Optional

import typer

from webident.config_logging import configure_logging
from webident.context import StaticBrowserContext
from webident.exceptions import IdentityError
from webident.identity import BrowserIdentity

cli = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Derive host identity facts from a browser user agent string",
)

# Options
user_agent_option = typer.Option(
    None,
    "--user-agent",
    "-u",
    help="The navigator user agent string",
)

domain_option = typer.Option(
    None,
    "--domain",
    "-d",
    help="The hostname of the document location",
)

language_option = typer.Option(
    None,
    "--language",
    "-l",
    help="A declared navigator language, may be repeated in preference order",
)


@cli.callback()
def setup():
    """CLI Entrypoint"""
    configure_logging()


@cli.command()
def inspect(
    user_agent: Optional[str] = user_agent_option,
    domain: Optional[str] = domain_option,
    language: Optional[list[str]] = language_option,
):
    """Print every identity fact as JSON."""
    context = StaticBrowserContext(user_agent=user_agent, document_domain=domain, languages=language)
    typer.echo(BrowserIdentity(context).describe().model_dump_json(indent=2))


@cli.command()
def devicename(user_agent: str = typer.Argument(..., help="The user agent string")):
    """Print the browser name and version."""
    typer.echo(BrowserIdentity(StaticBrowserContext(user_agent=user_agent)).devicename())


@cli.command()
def distro(user_agent: str = typer.Argument(..., help="The user agent string")):
    """Print the OS distribution label."""
    try:
        label = BrowserIdentity(StaticBrowserContext(user_agent=user_agent)).distro()
    except IdentityError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(label)


@cli.command()
def platform(user_agent: str = typer.Argument(..., help="The user agent string")):
    """Print the platform family."""
    typer.echo(str(BrowserIdentity(StaticBrowserContext(user_agent=user_agent)).platform()))


if __name__ == "__main__":
    cli()
