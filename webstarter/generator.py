"""Main scaffolding orchestrator.

Takes a ``Config`` and produces the project folder: stylesheet, script and
markup, followed by ``git init``.  Steps run strictly one after another.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .config import Config
from .files import FileResult, create_file
from .git import init_repository
from .templates import css_template, make_html_template, make_js_template
from .utils import print_info, print_summary_table, print_warning


@dataclass
class ScaffoldResult:
    """Aggregated outcome of one scaffolding run."""

    project_path: Path
    files: list[FileResult] = field(default_factory=list)
    git_initialized: bool = False

    @property
    def failed_files(self) -> list[FileResult]:
        return [f for f in self.files if not f.ok]

    @property
    def success(self) -> bool:
        """True when every file was written."""
        return not self.failed_files


class ProjectGenerator:
    """Scaffolds a minimal web project.

    Writes, in order:
    - ``<name>/styles/main.css``
    - ``<name>/src/index.js``
    - ``<name>/index.html``

    and then initializes a git repository in ``<name>/``.  File failures are
    collected in the result; a git failure raises ``GitError``.
    """

    def __init__(self, config: Config) -> None:
        self.config = config

    # -- Public API --------------------------------------------------------

    async def generate(self) -> ScaffoldResult:
        """Generate the project under ``config.base_dir``.

        Returns:
            A ``ScaffoldResult`` with one entry per file.

        Raises:
            GitError: If ``git init`` fails.
        """
        name = self.config.project_name
        base_dir = self.config.base_dir
        result = ScaffoldResult(project_path=self.config.project_path)

        print_info("🤠 Howdy! We're making your project now!")

        result.files.append(
            await create_file(base_dir, self.config.stylesheet_file, css_template())
        )
        result.files.append(
            await create_file(base_dir, self.config.script_file, make_js_template(name))
        )
        result.files.append(
            await create_file(base_dir, self.config.markup_file, make_html_template(name))
        )

        if result.failed_files:
            self._report_failures(result.failed_files)

        if self.config.init_git:
            await init_repository(result.project_path, timeout=self.config.git_timeout)
            result.git_initialized = True
            print_info("🐙 Initialized new git repository")

        print_info("🤠 Done!")
        return result

    # -- Reporting ---------------------------------------------------------

    @staticmethod
    def _report_failures(failed: list[FileResult]) -> None:
        print_warning(f"{len(failed)} file(s) could not be written:")
        print_summary_table(
            {f.path: f.error or "unknown error" for f in failed},
            title="Failed files",
        )
