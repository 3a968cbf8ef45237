"""Small file-system helpers for download and state directories."""
import logging
import shutil
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def create_dir(dir_path: Path) -> Path:
    """Create dir_path (and parents) if missing. Returns the path."""
    dir_path = Path(dir_path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def remove_dir(dir_path: Path) -> bool:
    """Delete a directory tree. Returns False if there was nothing to delete."""
    dir_path = Path(dir_path)
    if not dir_path.exists():
        return False

    shutil.rmtree(dir_path)
    logger.info(f"All contents deleted from folder: {dir_path}")
    return True


def path_exists(path: Path) -> bool:
    return Path(path).exists()


def read_file(file_path: Path) -> Optional[str]:
    """Read a UTF-8 text file. Returns None if it does not exist."""
    file_path = Path(file_path)
    if not file_path.is_file():
        return None
    return file_path.read_text(encoding="utf-8")


def write_file(file_path: Path, content: str) -> None:
    """Write a UTF-8 text file, creating parent directories as needed."""
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding="utf-8")


def list_downloads(download_dir: Path, suffix: str = ".pdf") -> list[Path]:
    """
    List saved downloads in download_dir with the given suffix.

    Returns paths sorted by name; downloads are prefixed with an epoch
    timestamp, so this is also oldest-first.
    """
    download_dir = Path(download_dir)
    if not download_dir.is_dir():
        return []

    return sorted(
        p for p in download_dir.iterdir()
        if p.is_file() and p.suffix.lower() == suffix.lower()
    )
