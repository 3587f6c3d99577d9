"""Read a local project folder into one text blob for the model."""
import fnmatch
import logging
import os
from dataclasses import dataclass
from pathlib import Path

import aiofiles

from folderscope.config import MAX_CONTEXT_CHARS, MAX_FILE_CHARS

logger = logging.getLogger(__name__)

IGNORED_DIRS = {
    "node_modules",
    ".git",
    "dist",
    "build",
    ".next",
    "__pycache__",
    ".pytest_cache",
    "venv",
    ".venv",
    ".env",
    "logs",
    "temp",
    "tmp",
    "coverage",
    ".nyc_output",
    "bower_components",
    "vendor",
}

IGNORED_FILE_PATTERNS = (
    "*.log",
    "*.lock",
    "*.tmp",
    ".DS_Store",
    "Thumbs.db",
    "*.db",
    "*.sqlite",
    "*.sqlite3",
)

BINARY_EXTENSIONS = {
    ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".ico", ".svg",
    ".pdf", ".doc", ".docx", ".xls", ".xlsx", ".ppt", ".pptx",
    ".zip", ".rar", ".tar", ".gz", ".7z",
    ".exe", ".dll", ".so", ".dylib",
    ".mp3", ".mp4", ".avi", ".mov", ".wmv",
    ".ttf", ".woff", ".woff2", ".eot",
}


class FolderAccessError(Exception):
    """Folder is missing, unreadable or not a directory."""


@dataclass
class FolderContext:
    context: str
    project_name: str
    file_count: int


def is_ignored_file(name):
    if name.startswith("."):
        return True
    if Path(name).suffix.lower() in BINARY_EXTENSIONS:
        return True
    return any(fnmatch.fnmatch(name, pattern) for pattern in IGNORED_FILE_PATTERNS)


def iter_candidate_files(root):
    """Yield files under ``root`` in a stable order, pruning ignored dirs."""
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(
            d for d in dirnames if d not in IGNORED_DIRS and not d.startswith(".")
        )
        for filename in sorted(filenames):
            if not is_ignored_file(filename):
                yield Path(dirpath) / filename


async def read_text(path):
    async with aiofiles.open(path, "r", encoding="utf-8") as handle:
        return await handle.read()


async def read_local_folder(
    folder_path,
    max_file_chars=MAX_FILE_CHARS,
    max_context_chars=MAX_CONTEXT_CHARS,
):
    root = Path(folder_path).expanduser().resolve()
    try:
        exists = root.exists()
        is_dir = root.is_dir()
    except OSError as exc:
        raise FolderAccessError(f"Cannot access directory: {exc}") from exc
    if not exists:
        raise FolderAccessError(f"Cannot access directory: {root} does not exist")
    if not is_dir:
        raise FolderAccessError(f"Path is not a directory: {root}")

    parts = []
    size = 0
    file_count = 0

    for path in iter_candidate_files(root):
        try:
            content = await read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Skipping unreadable file %s: %s", path, exc)
            continue

        if len(content) > max_file_chars:
            logger.debug("Skipping large file %s (%d chars)", path, len(content))
            continue

        entry = f"--- File: {path.relative_to(root).as_posix()} ---\n{content}\n\n"
        parts.append(entry)
        size += len(entry)
        file_count += 1

        if size > max_context_chars:
            logger.info("📦 Context limit reached after %d files", file_count)
            break

    logger.info("📁 Read %d files (%d chars) from %s", file_count, size, root)
    return FolderContext(context="".join(parts), project_name=root.name, file_count=file_count)
