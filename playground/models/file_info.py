"""File metadata models."""

from datetime import datetime

from pydantic import BaseModel


class PathInfo(BaseModel):
    directory: str
    base_name: str
    extension: str
    stem: str


class FileInfo(BaseModel):
    """Result of inspecting a single path.

    Only ``exists`` and ``path`` are guaranteed; the remaining fields are set
    when the path exists and could be stat'ed.
    """

    exists: bool
    path: str
    name: str | None = None
    size: int | None = None
    size_kb: float | None = None
    created: datetime | None = None
    modified: datetime | None = None
    accessed: datetime | None = None
    is_file: bool | None = None
    is_directory: bool | None = None
    permissions: str | None = None
    path_info: PathInfo | None = None
    message: str | None = None
    error: str | None = None
