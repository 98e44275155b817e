from pathlib import Path

HTTPD_ROOT = Path("/usr/local/etc/httpd")
SITES_AVAILABLE = "sites-available"
SITES_ENABLED = "sites-enabled"
SSL_INCLUDE = Path("ssl") / "ssl-shared-cert.inc"

SETTINGS_ENV = "VH_CONFIG_FILE"
SETTINGS_PATH = Path.home() / ".config" / "vh-config" / "config.toml"
