"""create-vue scaffolder -- renders template trees into a new project.

The building blocks are:

- ``deep_merge`` / ``sort_dependencies`` for reconciling ``package.json``
- ``pre_order_directory_traverse`` / ``post_order_directory_traverse`` for
  walking (and mutating) a directory tree
- ``render_template`` / ``TemplateRenderer`` for copying a template subtree
- ``ProjectGenerator`` for orchestrating a complete scaffold

Quick usage::

    from create_vue.config import ScaffoldConfig
    from create_vue.scaffolder import ProjectGenerator

    root = ProjectGenerator(ScaffoldConfig(target_dir="demo")).generate()
"""

from create_vue.scaffolder.errors import (
    ManifestParseError,
    OperationCancelledError,
    ScaffoldError,
)
from create_vue.scaffolder.generator import ProjectGenerator
from create_vue.scaffolder.merge import deep_merge, sort_dependencies
from create_vue.scaffolder.templates import TemplateRenderer, render_template
from create_vue.scaffolder.traverse import (
    empty_dir,
    post_order_directory_traverse,
    pre_order_directory_traverse,
)

__all__ = [
    "ManifestParseError",
    "OperationCancelledError",
    "ProjectGenerator",
    "ScaffoldError",
    "TemplateRenderer",
    "deep_merge",
    "empty_dir",
    "post_order_directory_traverse",
    "pre_order_directory_traverse",
    "render_template",
    "sort_dependencies",
]
