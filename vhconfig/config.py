from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any

try:
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - py311+
    import tomli as tomllib

from vhconfig import paths
from vhconfig.errors import SettingsError

DEFAULT_PHP = "72"
DEFAULT_DOMAIN_SUFFIX = "blee.ch"
DEFAULT_RESTART_COMMAND = ("brew", "services", "restart", "httpd")
DEFAULT_IGNORE = (".*", "*.bak", "*.swp", "*~")


@dataclass(frozen=True)
class Settings:
    httpd_root: str = str(paths.HTTPD_ROOT)
    sites_available: str = paths.SITES_AVAILABLE
    sites_enabled: str = paths.SITES_ENABLED
    restart_command: tuple[str, ...] = DEFAULT_RESTART_COMMAND
    http_port: int = 8080
    https_port: int = 8443
    domain_suffix: str = DEFAULT_DOMAIN_SUFFIX
    default_php: str = DEFAULT_PHP
    ignore: tuple[str, ...] = DEFAULT_IGNORE

    @property
    def root(self) -> Path:
        return Path(self.httpd_root)

    @property
    def sites_available_dir(self) -> Path:
        return self.root / self.sites_available

    @property
    def sites_enabled_dir(self) -> Path:
        return self.root / self.sites_enabled

    @property
    def ssl_include(self) -> Path:
        return self.root / paths.SSL_INCLUDE


def settings_path() -> Path:
    override = os.environ.get(paths.SETTINGS_ENV)
    if override:
        return Path(override).expanduser()
    return paths.SETTINGS_PATH


def _as_tuple(value: Any, default: tuple[str, ...]) -> tuple[str, ...]:
    if value is None:
        return default
    if isinstance(value, str):
        return tuple(value.split())
    return tuple(str(item) for item in value)


def parse_settings(raw: dict[str, Any]) -> Settings:
    defaults = Settings()
    httpd = raw.get("httpd", {})
    site = raw.get("site", {})
    return Settings(
        httpd_root=str(httpd.get("root", defaults.httpd_root)),
        sites_available=httpd.get("sites_available", defaults.sites_available),
        sites_enabled=httpd.get("sites_enabled", defaults.sites_enabled),
        restart_command=_as_tuple(httpd.get("restart_command"), defaults.restart_command),
        http_port=int(httpd.get("http_port", defaults.http_port)),
        https_port=int(httpd.get("https_port", defaults.https_port)),
        domain_suffix=site.get("domain_suffix", defaults.domain_suffix),
        default_php=str(site.get("default_php", defaults.default_php)),
        ignore=_as_tuple(site.get("ignore"), defaults.ignore),
    )


def read_settings(path: Path | None = None) -> Settings:
    if path is None:
        path = settings_path()
    if not path.exists():
        return Settings()
    try:
        raw = tomllib.loads(path.read_text(encoding="utf-8"))
        return parse_settings(raw)
    except (tomllib.TOMLDecodeError, TypeError, ValueError) as exc:
        raise SettingsError(f"invalid settings file {path}: {exc}") from exc
