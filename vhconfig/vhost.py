from __future__ import annotations

from fnmatch import fnmatch
from pathlib import Path
from typing import Callable, Sequence

from InquirerPy import inquirer

from vhconfig import template
from vhconfig.config import Settings
from vhconfig.errors import ConflictError, PromptError, ValidationError
from vhconfig.options import Options
from vhconfig.system import Host, LocalHost
from vhconfig.ui import highlight, ui

Picker = Callable[[Sequence[str]], str]


def config_paths(name: str, settings: Settings) -> tuple[Path, Path]:
    """Return the (available, enabled) paths for a project's config file."""
    file_name = template.config_file_name(name)
    return settings.sites_available_dir / file_name, settings.sites_enabled_dir / file_name


def create(
    work_dir: str,
    options: Options,
    settings: Settings,
    host: Host | None = None,
) -> Path:
    host = host or LocalHost()
    name = template.project_name(work_dir)
    file_name = template.config_file_name(name)
    available, enabled = config_paths(name, settings)

    if not options.force and not host.is_dir(Path(work_dir) / "web"):
        raise ValidationError(
            "Current directory doesn't seem to be a valid project.",
            hint="Please use '--force' option to suppress this warning.",
        )
    if host.exists(available) and not options.overwrite:
        raise ConflictError(
            f"Looks like the config file ({file_name}) already exists.",
            hint="Please delete it before trying again or use the '-x' flag.",
        )

    if options.overwrite:
        _clean_up(available, enabled, host)

    contents = template.render(work_dir, name, options.php, settings)
    host.ensure_dir(available.parent)
    host.ensure_dir(enabled.parent)
    host.write_text(available, contents)
    # A failure here leaves the written file without its symlink.
    host.symlink(available, enabled)
    ui.ok(f"File named {highlight(file_name)} was created.")

    if options.restart:
        restart_service(settings, host)
    return available


def _clean_up(available: Path, enabled: Path, host: Host) -> None:
    for path in (available, enabled):
        if host.exists(path):
            host.remove(path)


def restart_service(settings: Settings, host: Host | None = None) -> int | None:
    """
    Run the web server restart command without waiting on its verdict.
    A non-zero status is reported as a warning, never as an error.
    """
    host = host or LocalHost()
    command = list(settings.restart_command)
    ui.step("Sending restart command `httpd`:")
    try:
        code = host.run(command)
    except OSError as exc:
        ui.warn(f"could not run `{' '.join(command)}`: {exc}")
        return None
    if code != 0:
        ui.warn(f"`{' '.join(command)}` exited with status {code}")
    return code


def list_configs(settings: Settings, host: Host | None = None) -> list[str]:
    host = host or LocalHost()
    directory = settings.sites_available_dir
    if not host.is_dir(directory):
        return []
    return [
        name
        for name in host.list_dir(directory)
        if not any(fnmatch(name, pattern) for pattern in settings.ignore)
    ]


def pick(choices: Sequence[str]) -> str:
    try:
        selected = inquirer.select(
            message="Select the config file to remove:",
            choices=list(choices),
            mandatory=False,
            keybindings={"skip": [{"key": "escape"}]},
        ).execute()
    except (KeyboardInterrupt, EOFError) as exc:
        raise PromptError("Removal cancelled, nothing was deleted.") from exc
    if selected is None:
        raise PromptError("Removal cancelled, nothing was deleted.")
    return selected


def remove(
    options: Options,
    settings: Settings,
    host: Host | None = None,
    picker: Picker | None = None,
) -> str | None:
    host = host or LocalHost()
    picker = picker or pick
    choices = list_configs(settings, host)
    if not choices:
        ui.step(f"No config files found in {settings.sites_available_dir}")
        return None

    file_name = picker(choices)
    available = settings.sites_available_dir / file_name
    enabled = settings.sites_enabled_dir / file_name

    host.remove(available)
    ui.ok(f"Deleted {available}")
    if host.exists(enabled):
        host.remove(enabled)
        ui.ok(f"Deleted {enabled}")
    else:
        ui.step(f"No symlink at {enabled}, skipped")

    if options.restart:
        restart_service(settings, host)
    return file_name
