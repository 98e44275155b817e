from __future__ import annotations

from pathlib import PurePosixPath

from vhconfig.config import Settings

_BLOCK = """<VirtualHost *:{port}>
    DocumentRoot {web_root}
    ServerName {server_name}
    RewriteCond {web_root}/%{{REQUEST_FILENAME}} -f
    RewriteRule ^/(.*\\.php(/.*)?)$ fcgi://127.0.0.1:90{php}{web_root}/$1 [P,QSA,L]
{extra}    <Directory {web_root}>
        Options -Indexes +FollowSymLinks -MultiViews
        AllowOverride All
        Require all granted
    </Directory>
</VirtualHost>
"""

_SSL_INCLUDE = '    Include "{ssl_include}"\n'


def project_name(work_dir: str) -> str:
    """Name of the project the tool was run from: the last path segment."""
    return PurePosixPath(work_dir).name


def config_file_name(name: str) -> str:
    return f"{name}.conf"


def server_name(name: str, settings: Settings) -> str:
    return f"{name}.local.{settings.domain_suffix}"


def render(work_dir: str, name: str, php: str, settings: Settings | None = None) -> str:
    if settings is None:
        settings = Settings()
    values = {
        "web_root": f"{str(work_dir).rstrip('/')}/web",
        "server_name": server_name(name, settings),
        "php": php,
    }
    plain = _BLOCK.format(port=settings.http_port, extra="", **values)
    tls = _BLOCK.format(
        port=settings.https_port,
        extra=_SSL_INCLUDE.format(ssl_include=settings.ssl_include),
        **values,
    )
    return plain + tls
