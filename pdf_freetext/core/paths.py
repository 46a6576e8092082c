import logging
import os
from pathlib import Path
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)

# Limits and filters
MAX_FILE_SIZE = 100 * 1024 * 1024  # 100MB
ALLOWED_EXTENSIONS = [".pdf"]

# Directories the inspection tools may read from (set once at startup)
SEARCH_DIRECTORIES: List[str] = []


def _is_within(base: str, target: str) -> bool:
    base = os.path.join(os.path.realpath(base), "")  # ensure trailing separator
    target = os.path.realpath(target)
    return target.startswith(base) or target == base[:-1]


def configure(directories: Sequence[str], max_file_size: int = MAX_FILE_SIZE) -> List[str]:
    """Validate ``directories`` and make them the accessible roots.

    Directories that do not exist or cannot be read are skipped with a
    warning. Returns the accepted (real) paths.
    """
    global MAX_FILE_SIZE

    MAX_FILE_SIZE = int(max_file_size)
    validated: List[str] = []
    for d in directories:
        real_path = os.path.realpath(os.path.abspath(os.path.expanduser(d)))
        if not os.path.isdir(real_path):
            logger.warning(f"Not a directory, skipped: {d} -> {real_path}")
            continue
        if not os.access(real_path, os.R_OK):
            logger.warning(f"Unreadable directory, skipped: {d} -> {real_path}")
            continue
        validated.append(real_path)

    # mutate in place so modules holding the list see the update
    SEARCH_DIRECTORIES.clear()
    SEARCH_DIRECTORIES.extend(validated)
    logger.info(f"Configured {len(SEARCH_DIRECTORIES)} accessible directories")
    return validated


def validate_and_resolve_path(file_path: str) -> Optional[Path]:
    """Return the resolved path when it is an allowed, readable PDF, else None."""
    real_path = os.path.realpath(os.path.abspath(os.path.expanduser(file_path)))

    if not any(_is_within(allowed, real_path) for allowed in SEARCH_DIRECTORIES):
        logger.warning(f"Path outside allowed directories: {file_path}")
        return None

    resolved = Path(real_path)
    if not resolved.is_file():
        return None
    if resolved.suffix.lower() not in ALLOWED_EXTENSIONS:
        logger.warning(f"Disallowed file extension: {file_path}")
        return None
    if resolved.stat().st_size > MAX_FILE_SIZE:
        logger.warning(f"File too large: {file_path}")
        return None
    return resolved


def find_file(file_name: str) -> Optional[Path]:
    """Resolve an absolute path, or a name relative to one of the allowed directories."""
    if os.path.isabs(file_name) or file_name.startswith("~"):
        return validate_and_resolve_path(file_name)

    for directory in SEARCH_DIRECTORIES:
        path = validate_and_resolve_path(os.path.join(directory, file_name))
        if path is not None:
            return path

    logger.warning(f"File not found: {file_name}")
    return None
