from pathlib import Path

import pytest

from vhconfig import config


class FakeHost:
    def __init__(self, dirs=()):
        self.dirs = {Path(d) for d in dirs}
        self.files: dict[Path, str] = {}
        self.links: dict[Path, Path] = {}
        self.commands: list[list[str]] = []
        self.returncode = 0

    def exists(self, path):
        return path in self.files or path in self.links or path in self.dirs

    def is_dir(self, path):
        return path in self.dirs

    def list_dir(self, path):
        names = [entry.name for entry in [*self.files, *self.links] if entry.parent == path]
        return sorted(names)

    def ensure_dir(self, path):
        self.dirs.add(path)

    def write_text(self, path, contents):
        self.files[path] = contents

    def symlink(self, target, link):
        self.links[link] = target

    def remove(self, path):
        if path in self.files:
            del self.files[path]
        elif path in self.links:
            del self.links[path]
        else:
            raise FileNotFoundError(str(path))

    def run(self, argv):
        self.commands.append(list(argv))
        return self.returncode


@pytest.fixture
def settings():
    return config.Settings(httpd_root="/srv/httpd", restart_command=("brew", "services", "restart", "httpd"))


@pytest.fixture
def fake_host(settings):
    return FakeHost(dirs=[settings.root, settings.sites_available_dir, settings.sites_enabled_dir])


@pytest.fixture
def httpd_root(tmp_path, monkeypatch):
    root = tmp_path / "httpd"
    (root / "sites-available").mkdir(parents=True)
    (root / "sites-enabled").mkdir()
    settings_file = tmp_path / "config.toml"
    settings_file.write_text(f'[httpd]\nroot = "{root}"\n', encoding="utf-8")
    monkeypatch.setenv("VH_CONFIG_FILE", str(settings_file))
    return root


@pytest.fixture
def project(tmp_path, monkeypatch):
    work_dir = tmp_path / "projects" / "acme"
    (work_dir / "web").mkdir(parents=True)
    monkeypatch.chdir(work_dir)
    return work_dir
