"""Writing generated content to disk.

``create_file`` is best-effort: directory and write failures are reported on
stderr and captured in the returned ``FileResult`` instead of being raised,
so one unwritable file never aborts the rest of the scaffold.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path

from .utils import print_error, print_info


@dataclass
class FileResult:
    """Outcome of materializing one file."""

    path: str
    ok: bool
    error: str | None = None
    created_dirs: list[str] = field(default_factory=list)


def create_folder(base_dir: str | Path, folder: str) -> bool:
    """Create ``base_dir/folder`` if it does not exist yet.

    The parent must already exist; callers walk the path shortest prefix
    first.  Returns ``True`` only when this call created the directory.
    Failures (including invalid path characters) are printed and swallowed.
    """
    folder_path = Path(base_dir) / folder
    try:
        if not folder_path.exists():
            folder_path.mkdir()
            return True
    except (OSError, ValueError) as exc:
        print_error(f"Could not create folder {folder}: {exc}")
    return False


def _folder_prefixes(file_path: str) -> list[str]:
    """Return every directory prefix of *file_path*, shortest first.

    ``"app/styles/main.css"`` -> ``["app", "app/styles"]``.
    """
    folders = file_path.split("/")[:-1]
    return ["/".join(folders[: i + 1]) for i in range(len(folders))]


def _write_file(path: Path, content: str) -> None:
    path.write_text(content, encoding="utf-8")


async def create_file(base_dir: str | Path, file_path: str, content: str) -> FileResult:
    """Write *content* (stripped) to ``base_dir/file_path``.

    Intermediate directories are created first.  An existing file is
    overwritten.

    Args:
        base_dir: Directory *file_path* is relative to.
        file_path: Slash-separated relative path of the file.
        content: Text to write; leading/trailing whitespace is removed.

    Returns:
        A ``FileResult`` describing what happened.  Never raises for I/O
        or invalid-path errors.
    """
    created: list[str] = []
    for folder in _folder_prefixes(file_path):
        if create_folder(base_dir, folder):
            created.append(folder)

    target = Path(base_dir) / file_path
    try:
        await asyncio.to_thread(_write_file, target, content.strip())
    except (OSError, ValueError) as exc:
        print_error(f"Could not write {file_path}: {exc}")
        return FileResult(path=file_path, ok=False, error=str(exc), created_dirs=created)

    print_info(f"📄 Generated {file_path}")
    return FileResult(path=file_path, ok=True, created_dirs=created)
