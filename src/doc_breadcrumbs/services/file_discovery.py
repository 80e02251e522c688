"""File discovery utilities for walking source trees."""

import os
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path

from doc_breadcrumbs.config import get_settings
from doc_breadcrumbs.logging import get_logger
from doc_breadcrumbs.parsers import get_provider_registry

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class DiscoveredFile:
    """A file discovered for extraction."""

    relative_path: str
    absolute_path: str
    size_bytes: int


def discover_files(root_path: str | Path) -> list[DiscoveredFile]:
    """
    Walk a directory tree and discover files a provider can parse.

    Skips the configured directories (``node_modules``, ``dist``,
    ``build``, ...) and files over the size limit. Returns files sorted
    by path.
    """
    settings = get_settings()
    registry = get_provider_registry()
    supported_extensions = set(registry.supported_extensions)

    root = Path(root_path).resolve()
    if not root.is_dir():
        raise ValueError(f"Root path is not a directory: {root_path}")

    discovered: list[DiscoveredFile] = []

    for dirpath, dirnames, filenames in os.walk(root):
        # Filter out directories we should skip (in-place modification)
        dirnames[:] = [d for d in dirnames if d not in settings.skip_directories]

        for filename in filenames:
            ext = Path(filename).suffix.lower()
            if ext not in supported_extensions:
                continue

            abs_path = Path(dirpath) / filename

            try:
                stat = abs_path.stat()
            except OSError as e:
                logger.warning("file_stat_failed", path=str(abs_path), error=str(e))
                continue

            if stat.st_size > settings.max_file_size_bytes:
                logger.debug(
                    "file_skipped_too_large",
                    path=str(abs_path),
                    size=stat.st_size,
                    max_size=settings.max_file_size_bytes,
                )
                continue

            discovered.append(
                DiscoveredFile(
                    relative_path=abs_path.relative_to(root).as_posix(),
                    absolute_path=str(abs_path),
                    size_bytes=stat.st_size,
                )
            )

    # Sort by path for deterministic processing
    discovered.sort(key=lambda f: f.relative_path)

    logger.info(
        "files_discovered",
        root_path=str(root),
        file_count=len(discovered),
    )

    return discovered


def read_file_content(file_path: str | Path) -> str:
    """Read a source file as UTF-8, replacing undecodable bytes."""
    with open(file_path, "rb") as f:
        raw_content = f.read()
    return raw_content.decode("utf-8", errors="replace")


def read_file_exact(file_path: str | Path) -> str:
    """
    Read a source file as UTF-8 for rewriting.

    Undecodable bytes become lone surrogates (``surrogateescape``) so that
    ``write_file_exact`` puts them back unchanged.
    """
    with open(file_path, "rb") as f:
        raw_content = f.read()
    return raw_content.decode("utf-8", errors="surrogateescape")


def write_file_exact(file_path: str | Path, content: str) -> None:
    """
    Replace a file's content atomically.

    The new content goes to a temporary file beside the target, which is
    then renamed over it; the target is never left truncated.
    """
    path = Path(file_path)
    data = content.encode("utf-8", errors="surrogateescape")

    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
    except OSError:
        Path(tmp_name).unlink(missing_ok=True)
        raise
