import os
import sys

import typer

from vhconfig import config
from vhconfig import vhost
from vhconfig.errors import MissingRootError, PromptError, UsageError, VhConfigError
from vhconfig.options import Mode, Options, php_suffix, select_mode
from vhconfig.ui import format_default_path, format_help, format_version, ui

app = typer.Typer(add_completion=False)


def check_environment(settings: config.Settings) -> None:
    if not settings.root.exists():
        raise MissingRootError(f"{settings.httpd_root} path not found")


def _report(error: VhConfigError) -> None:
    if isinstance(error, PromptError):
        ui.step(error.message)
        return
    ui.fail(error.message)
    if error.hint:
        typer.echo(error.hint, err=True)


@app.command(
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
    add_help_option=False,
)
def vh_config(
    version: bool = typer.Option(False, "-v", help="Print version number."),
    show_help: bool = typer.Option(False, "-h", "--help", help="Print command line options."),
    default_path: bool = typer.Option(False, "-d", "--default", help="Print the httpd configuration path."),
    force: bool = typer.Option(False, "-f", "--force", help="Skip the project directory check."),
    restart: bool = typer.Option(False, "-r", "--restart", help="Restart httpd after writing."),
    overwrite: bool = typer.Option(False, "-x", help="Overwrite an existing config file."),
    remove: bool = typer.Option(False, "-R", "--Remove", help="Pick a config file to remove."),
    php: str = typer.Option(
        None, "--php", is_flag=False, flag_value="", help="PHP-FPM port suffix (2-3 digits)."
    ),
):
    """Generate an Apache virtual host for the current project."""
    try:
        settings = config.read_settings()
        check_environment(settings)
        mode = select_mode(version, show_help, default_path, remove)
        if mode is Mode.VERSION:
            typer.echo(format_version())
        elif mode is Mode.HELP:
            typer.echo(format_help())
        elif mode is Mode.DEFAULT_PATH:
            typer.echo(format_default_path(settings.httpd_root))
        else:
            options = Options(
                force=force,
                restart=restart,
                overwrite=overwrite,
                php=php_suffix(php, settings.default_php),
            )
            if mode is Mode.REMOVE:
                vhost.remove(options, settings)
            else:
                vhost.create(os.getcwd(), options, settings)
    except VhConfigError as exc:
        _report(exc)
        raise typer.Exit(code=exc.exit_code)
    raise typer.Exit(code=0)


def main():
    if not sys.argv:
        error = UsageError("Looks like something went wrong: no arguments were passed.")
        _report(error)
        raise SystemExit(error.exit_code)
    app()
