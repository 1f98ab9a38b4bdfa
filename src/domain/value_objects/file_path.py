from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Optional

from ..exceptions.domain_exceptions import InvalidFilePathError


@dataclass(frozen=True)
class FilePath:
    """Immutable value object representing a file path within a project."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or self.value.strip() == "":
            raise InvalidFilePathError("File path cannot be empty")

        # Prevent path traversal attacks
        if ".." in PurePosixPath(self.value).parts:
            raise InvalidFilePathError(f"Path traversal not allowed: {self.value}")

    @classmethod
    def relative_to_project(
        cls,
        project_root: str,
        file_path: str,
        project_name: Optional[str] = None,
    ) -> "FilePath":
        """Build the project-relative path of a file.

        Relative file paths are taken as already project-relative. An
        absolute path outside the project root falls back to the bare file
        name. When ``project_name`` is given it becomes the first
        path segment, e.g. ``myproject/src/main.py``.
        """
        if not file_path or file_path.strip() == "":
            raise InvalidFilePathError("File path cannot be empty")

        root = Path(project_root) if project_root else None
        target = Path(file_path)

        relative = ""
        if not target.is_absolute():
            relative = target.as_posix()
        elif root is not None:
            try:
                relative = target.relative_to(root).as_posix()
            except ValueError:
                relative = ""
        if relative in ("", "."):
            relative = target.name

        if project_name:
            return cls(f"{project_name}/{relative}")
        return cls(relative)

    def __str__(self) -> str:
        return self.value
