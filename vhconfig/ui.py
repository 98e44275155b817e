from __future__ import annotations

from typing import Sequence

import typer

from vhconfig import __version__

USAGE = "Usage: vh-config [options]"

OPTIONS: tuple[tuple[str, str], ...] = (
    ("-d, --default", "print path to the httpd configuration"),
    ("-f, --force", "force if project not found in working directory"),
    ("-h, --help", "print command line options"),
    ("-r, --restart", "restart the httpd service after writing"),
    ("-R, --Remove", "pick an existing config file and remove it"),
    ("-v", "print vh-config version number"),
    ("-x", "overwrite existing config file"),
    ("--php=NN", "PHP-FPM port suffix, e.g. 81 for 127.0.0.1:9081"),
)


class UI:
    def step(self, msg: str) -> None:
        typer.echo(msg)

    def ok(self, msg: str = "Done") -> None:
        typer.echo(msg)

    def warn(self, msg: str) -> None:
        typer.secho(f"warning: {msg}", fg=typer.colors.YELLOW, err=True)

    def fail(self, msg: str) -> None:
        typer.secho(f"error: {msg}", fg=typer.colors.RED, err=True)


ui = UI()


def format_help(options: Sequence[tuple[str, str]] = OPTIONS) -> str:
    width = max(len(flag) for flag, _ in options) + 1
    lines = [USAGE, "", "Options:"]
    lines.extend(f"{flag.ljust(width)}{description}" for flag, description in options)
    return "\n".join(lines)


def format_version(version: str = __version__) -> str:
    major, minor, patch = version.split(".")[:3]
    return f"v{major}.{minor}.{patch}"


def format_default_path(root: str) -> str:
    return f"Target path: {root}"


def highlight(text: str) -> str:
    return typer.style(text, fg=typer.colors.YELLOW)
