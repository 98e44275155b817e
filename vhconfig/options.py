from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import re

from vhconfig.config import DEFAULT_PHP

PHP_PATTERN = re.compile(r"^\d{2,3}$")


class Mode(Enum):
    VERSION = "version"
    HELP = "help"
    DEFAULT_PATH = "default-path"
    REMOVE = "remove"
    CREATE = "create"


@dataclass(frozen=True)
class Options:
    force: bool = False
    restart: bool = False
    overwrite: bool = False
    php: str = DEFAULT_PHP


def php_suffix(value: str | None, default: str = DEFAULT_PHP) -> str:
    """Return the FastCGI port suffix for ``--php``, or ``default`` if unusable."""
    if value is None:
        return default
    value = value.strip()
    if PHP_PATTERN.match(value):
        return value
    return default


def select_mode(
    version: bool = False,
    show_help: bool = False,
    default_path: bool = False,
    remove: bool = False,
) -> Mode:
    # First match wins.
    if version:
        return Mode.VERSION
    if show_help:
        return Mode.HELP
    if default_path:
        return Mode.DEFAULT_PATH
    if remove:
        return Mode.REMOVE
    return Mode.CREATE
