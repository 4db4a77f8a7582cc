"""webstarter -- scaffolds a minimal web project.

Quick usage::

    from webstarter import Config, ProjectGenerator

    config = Config(project_name="myApp", base_dir="/tmp/sites")
    result = await ProjectGenerator(config).generate()
"""

from webstarter.config import Config
from webstarter.generator import ProjectGenerator, ScaffoldResult
from webstarter.git import GitError

__all__ = [
    "Config",
    "GitError",
    "ProjectGenerator",
    "ScaffoldResult",
]
