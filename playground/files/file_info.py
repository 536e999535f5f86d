"""Filesystem metadata inspection for a single path."""

import os
import stat
import sys
from datetime import datetime
from pathlib import Path

from playground.logging_config import logger
from playground.models.file_info import FileInfo, PathInfo

KB = 1024
MB = 1024 * 1024
RECENT_MODIFICATION_MINUTES = 5


def _created_at(stats: os.stat_result) -> datetime:
    # st_birthtime is missing on most Linux filesystems; fall back to ctime.
    birthtime = getattr(stats, "st_birthtime", None)
    return datetime.fromtimestamp(birthtime if birthtime is not None else stats.st_ctime)


def describe_path(path: Path) -> PathInfo:
    return PathInfo(
        directory=str(path.parent),
        base_name=path.name,
        extension=path.suffix,
        stem=path.stem,
    )


def get_file_info(path: str | Path) -> FileInfo:
    """Stat ``path`` and collect its metadata.

    Args:
        path: File or directory to inspect.

    Returns:
        FileInfo with ``exists=False`` for a missing path, or with ``error``
        set when the path exists but cannot be stat'ed.
    """
    path = Path(path)
    logger.info("FILE_INFO_REQUESTED", path=str(path))
    try:
        stats = path.stat()
    except (FileNotFoundError, NotADirectoryError):
        logger.warning("FILE_NOT_FOUND", path=str(path))
        return FileInfo(exists=False, path=str(path), message="File not found")
    except OSError as exc:
        logger.error("FILE_STAT_FAILED", path=str(path), error=str(exc))
        return FileInfo(exists=True, path=str(path), error=str(exc))

    return FileInfo(
        exists=True,
        path=str(path),
        name=path.name,
        size=stats.st_size,
        size_kb=round(stats.st_size / KB, 2),
        created=_created_at(stats),
        modified=datetime.fromtimestamp(stats.st_mtime),
        accessed=datetime.fromtimestamp(stats.st_atime),
        is_file=stat.S_ISREG(stats.st_mode),
        is_directory=stat.S_ISDIR(stats.st_mode),
        permissions=oct(stats.st_mode)[2:],
        path_info=describe_path(path),
    )


def size_category(size: int) -> str:
    if size < KB:
        return "Small (< 1KB)"
    if size < MB:
        return "Medium (< 1MB)"
    return "Large (>= 1MB)"


def age_text(created: datetime, now: datetime) -> str:
    """Age in whole minutes under an hour, otherwise in whole hours."""
    minutes = int((now - created).total_seconds() // 60)
    if minutes < 60:
        return f"{minutes} minutes old"
    return f"{minutes // 60} hours old"


def minutes_since(moment: datetime, now: datetime) -> int:
    return int((now - moment).total_seconds() // 60)


def recently_modified(info: FileInfo, now: datetime) -> bool:
    return (
        info.modified is not None
        and minutes_since(info.modified, now) < RECENT_MODIFICATION_MINUTES
    )


def path_components(path: str | Path, cwd: str | Path | None = None) -> dict[str, str]:
    """Break ``path`` into its absolute, relative and parsed parts."""
    path = Path(path)
    resolved = path.resolve()
    return {
        "original": str(path),
        "absolute": str(resolved),
        "relative": os.path.relpath(resolved, cwd or Path.cwd()),
        "root": resolved.anchor,
        "directory": str(resolved.parent),
        "base": resolved.name,
        "extension": resolved.suffix,
        "name": resolved.stem,
    }


def platform_info() -> dict[str, str]:
    return {"os": sys.platform, "separator": os.sep, "delimiter": os.pathsep}


def info_lines(info: FileInfo, now: datetime) -> list[str]:
    """Human-readable report for ``info`` as seen at ``now``."""
    lines = [
        "File Information",
        "=" * 50,
        f"Full path: {info.path}",
        "-" * 50,
    ]
    if not info.exists:
        lines.append("File does not exist!")
        return lines
    if info.error:
        lines.append(f"Error getting file statistics: {info.error}")
        return lines

    lines += [
        "File exists!",
        "File Statistics:",
        f"   Size: {info.size} bytes ({info.size_kb:.2f} KB)",
        f"   Created: {info.created:%Y-%m-%d %H:%M:%S}",
        f"   Modified: {info.modified:%Y-%m-%d %H:%M:%S}",
        f"   Accessed: {info.accessed:%Y-%m-%d %H:%M:%S}",
        f"   Is File: {'Yes' if info.is_file else 'No'}",
        f"   Is Directory: {'Yes' if info.is_directory else 'No'}",
        f"   Permissions: {info.permissions}",
        "",
        "Path Information:",
        f"   Directory: {info.path_info.directory}",
        f"   Base name: {info.path_info.base_name}",
        f"   Extension: {info.path_info.extension or 'No extension'}",
        f"   Name without extension: {info.path_info.stem}",
    ]

    platform = platform_info()
    lines += [
        "",
        "Platform Information:",
        f"   OS: {platform['os']}",
        f'   Separator: "{platform["separator"]}"',
        f'   Delimiter: "{platform["delimiter"]}"',
        "",
        "Additional Analysis:",
        f"   File size category: {size_category(info.size)}",
        f"   File age: {age_text(info.created, now)}",
    ]
    if recently_modified(info, now):
        lines.append("   Recently modified (within 5 minutes)")
    else:
        lines.append(f"   Last modified {minutes_since(info.modified, now)} minutes ago")
    return lines
