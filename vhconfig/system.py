from __future__ import annotations

from pathlib import Path
import shutil
import subprocess
from typing import Protocol, Sequence


class Host(Protocol):
    """Filesystem and process operations the writer and remover rely on."""

    def exists(self, path: Path) -> bool: ...

    def is_dir(self, path: Path) -> bool: ...

    def list_dir(self, path: Path) -> list[str]: ...

    def ensure_dir(self, path: Path) -> None: ...

    def write_text(self, path: Path, contents: str) -> None: ...

    def symlink(self, target: Path, link: Path) -> None: ...

    def remove(self, path: Path) -> None: ...

    def run(self, argv: Sequence[str]) -> int: ...


class LocalHost:
    def exists(self, path: Path) -> bool:
        return path.exists() or path.is_symlink()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def list_dir(self, path: Path) -> list[str]:
        return sorted(entry.name for entry in path.iterdir())

    def ensure_dir(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def write_text(self, path: Path, contents: str) -> None:
        path.write_text(contents, encoding="utf-8")

    def symlink(self, target: Path, link: Path) -> None:
        if link.exists() or link.is_symlink():
            self.remove(link)
        link.symlink_to(target)

    def remove(self, path: Path) -> None:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()

    def run(self, argv: Sequence[str]) -> int:
        # Output goes straight to the terminal.
        return subprocess.run(list(argv), check=False).returncode
