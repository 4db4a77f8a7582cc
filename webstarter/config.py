"""webstarter configuration.

A single typed ``Config`` model describes one scaffolding run.  It is built
by the CLI from command-line arguments (or directly by callers) and passed
through the generator, so no component reads the process working directory
on its own.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

# Files written into every project, relative to the project folder.
STYLESHEET_PATH = "styles/main.css"
SCRIPT_PATH = "src/index.js"
MARKUP_PATH = "index.html"


class Config(BaseModel):
    """Settings for a single scaffolding run."""

    project_name: str = Field(..., description="Folder name and page title of the new project")
    base_dir: Path = Field(
        default_factory=Path.cwd,
        description="Directory the project folder is created in",
    )
    init_git: bool = Field(default=True, description="Run `git init` after writing files")
    git_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Seconds to wait for git; None waits indefinitely",
    )

    @field_validator("project_name", mode="before")
    @classmethod
    def _check_encodable(cls, value: Any) -> Any:
        # Runs before str validation, which cannot hold lone surrogates.
        if isinstance(value, str):
            if "\x00" in value:
                raise ValueError("project name must not contain NUL characters")
            try:
                value.encode("utf-8")
            except UnicodeEncodeError:
                # Undecodable argv bytes arrive as lone surrogates.
                raise ValueError(f"project name is not valid UTF-8: {value!r}") from None
        return value

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        # The name becomes a single directory under base_dir.
        if not value.strip():
            raise ValueError("project name must not be empty")
        if "/" in value or "\\" in value:
            raise ValueError(f"project name must not contain path separators: {value!r}")
        if value in (".", ".."):
            raise ValueError(f"project name must not be {value!r}")
        return value

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def project_path(self) -> Path:
        """Absolute path of the project folder."""
        return self.base_dir / self.project_name

    @property
    def stylesheet_file(self) -> str:
        """Stylesheet path relative to ``base_dir``."""
        return f"{self.project_name}/{STYLESHEET_PATH}"

    @property
    def script_file(self) -> str:
        """Script path relative to ``base_dir``."""
        return f"{self.project_name}/{SCRIPT_PATH}"

    @property
    def markup_file(self) -> str:
        """Markup path relative to ``base_dir``."""
        return f"{self.project_name}/{MARKUP_PATH}"
