import enum
from pathlib import Path

import platformdirs

platformdir = platformdirs.PlatformDirs("fcmp", "fcmp", roaming=False)


class PathMode(enum.IntEnum):
    FILE = 0o600
    DIR = 0o700


def _resolve_path_with_links(path: Path, mode: PathMode) -> Path:
    try:
        return path.resolve(strict=True)
    except FileNotFoundError:
        path = resolve_folder_with_links(path.parent) / path.name
        path.mkdir(mode.value) if mode == PathMode.DIR else path.touch(mode.value)
        return path.resolve(strict=True)


def resolve_folder_with_links(folder: Path) -> Path:
    return _resolve_path_with_links(folder, PathMode.DIR)


def resolve_file_with_links(file: Path) -> Path:
    return _resolve_path_with_links(file, PathMode.FILE)


def log_file_path(name: str = "fcmp.log") -> Path:
    """Return the log file location, creating the log directory if needed."""
    return resolve_folder_with_links(platformdir.user_log_path) / name
