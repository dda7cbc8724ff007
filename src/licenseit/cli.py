"""Command-line interface for licenseit."""

import logging
from pathlib import Path

import click
from rich.markup import escape

from licenseit import __version__
from licenseit.console import console
from licenseit.errors import (
    AbortedByUserError,
    LicenseitError,
    MissingAuthorError,
    TemplateNotFoundError,
)
from licenseit.generator import LicenseRequest, generate_license
from licenseit.templates import TemplateStore, load_template
from licenseit.writer import always_overwrite

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = "generate"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class LicenseGroup(click.Group):
    """Command group that routes an unknown first argument to `generate`.

    This lets `licenseit MIT --author X` work alongside `licenseit preview`
    without touching the argument list.
    """

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        if args and not args[0].startswith("-"):
            if self.get_command(ctx, args[0]) is None:
                return DEFAULT_COMMAND, self.get_command(ctx, DEFAULT_COMMAND), args
        return super().resolve_command(ctx, args)


def version_callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return
    console.print(f"licenseit [bold cyan]{__version__}[/bold cyan]")
    ctx.exit()


def prompt_for_author() -> str:
    """Ask for the author's name on the terminal."""
    return click.prompt(
        "Author not provided. Please enter the author's name",
        default="",
        show_default=False,
    )


def confirm_overwrite(path: Path) -> bool:
    """Ask before replacing an existing file."""
    return click.confirm(f"File '{path}' already exists. Overwrite?", default=False)


def displayable(text: str) -> str:
    """Make text printable: undecodable argv bytes become U+FFFD."""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def print_warning(message: str) -> None:
    console.print(f"[yellow]Warning: {escape(message)}[/yellow]", soft_wrap=True)


@click.group(cls=LicenseGroup, invoke_without_command=True)
@click.option(
    "--version",
    is_flag=True,
    callback=version_callback,
    expose_value=False,
    is_eager=True,
    help="Show version and exit.",
)
@click.pass_context
def main(ctx: click.Context) -> None:
    """Generate a license file based on a template and configuration.

    Usage: licenseit TEMPLATE [OPTIONS], where TEMPLATE is the base name of a
    license template (e.g. 'MIT'). Run 'licenseit preview' to list templates.
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command(DEFAULT_COMMAND)
@click.argument("template")
@click.option("--author", "-a", help="The author of the license.")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(path_type=Path),
    help="Path to the configuration file.",
)
@click.option("--file", "-f", "file_name", help="Name of the generated license file.")
@click.option(
    "--dir",
    "-d",
    "directory",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory to save the generated license.",
)
@click.option(
    "--date",
    help="Value for the {date} placeholder (default: current year).",
)
@click.option(
    "--yes",
    "-y",
    is_flag=True,
    default=False,
    help="Overwrite an existing file without asking.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def generate(
    ctx: click.Context,
    template: str,
    author: str | None,
    config_path: Path | None,
    file_name: str | None,
    directory: Path,
    date: str | None,
    yes: bool,
    verbose: bool,
) -> None:
    """Generate a license file from TEMPLATE."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)

    request = LicenseRequest(
        template=template,
        author=author,
        config_path=config_path,
        file_name=file_name,
        directory=directory,
        date=date,
    )
    logger.debug("Request: %s", request)

    try:
        result = generate_license(
            request,
            prompt_author=prompt_for_author,
            confirm_overwrite=always_overwrite if yes else confirm_overwrite,
            warn=print_warning,
        )
    except MissingAuthorError as e:
        console.print(f"[red]Error: {e}[/red]")
        click.echo(ctx.get_help())
        raise SystemExit(1) from None
    except TemplateNotFoundError as e:
        console.print(f"[red]Error loading template: {escape(str(e))}[/red]")
        console.print("[dim]Run 'licenseit preview' to list templates.[/dim]")
        raise SystemExit(1) from None
    except AbortedByUserError as e:
        console.print(f"[yellow]{escape(str(e))}[/yellow]", soft_wrap=True)
        raise SystemExit(1) from None
    except LicenseitError as e:
        console.print(
            f"[red]Error saving license: {escape(str(e))}[/red]", soft_wrap=True
        )
        raise SystemExit(1) from None

    output_name = escape(displayable(result.path.name))
    output_path = escape(displayable(str(result.path)))
    author_name = escape(displayable(result.author.name))
    console.print(
        f"[green]License '{output_name}' created at '{output_path}' "
        f"for author: {author_name}[/green]",
        soft_wrap=True,
    )


@main.command()
@click.option(
    "--show",
    "-s",
    "show_name",
    metavar="TEMPLATE",
    help="Print the body of a template instead of listing names.",
)
def preview(show_name: str | None) -> None:
    """Show available license templates."""
    store = TemplateStore()

    if show_name:
        try:
            template = load_template(show_name, store)
        except TemplateNotFoundError as e:
            console.print(f"[red]Error loading template: {escape(str(e))}[/red]")
            raise SystemExit(1) from None
        click.echo(template.body, nl=not template.body.endswith("\n"))
        return

    names = store.list_names()
    if not names:
        console.print("[yellow]No license templates found.[/yellow]")
        return

    console.print("[bold]Available license templates:[/bold]")
    for name in names:
        console.print(f"  - [cyan]{escape(name)}[/cyan]")
