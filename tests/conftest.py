from collections.abc import Callable, Generator, Iterable
from pathlib import Path

import pytest

type WriteLines = Callable[[str, Iterable[str]], Path]


@pytest.fixture
def isolated_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path]:
    """Keep log and config files written during tests out of the real user directories."""
    home = tmp_path / "home"
    monkeypatch.setenv("XDG_STATE_HOME", str(home / "state"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / "config"))
    yield home


@pytest.fixture
def write_lines(tmp_path: Path) -> WriteLines:
    def writer(name: str, lines: Iterable[str]) -> Path:
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return writer
