"""Main scaffolding orchestrator.

Takes a ``ScaffoldConfig`` and materialises a Vue 3 + Vite project by
rendering template subtrees into the same project root, one after another.
Later subtrees merge their ``package.json`` into the manifest written by
earlier ones, so the order of rendering matters:

1. ``base``
2. ``config/<feature>`` for every selected feature
3. ``code/[typescript-]<router|default>``
4. ``entry/<variant>``

Post-render fixups then rename JavaScript sources for TypeScript projects and
prune test directories when tests were declined.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import ScaffoldConfig
from ..utils import save_json
from .errors import ScaffoldError
from .readme import generate_readme
from .templates import TemplateRenderer
from .traverse import empty_dir, pre_order_directory_traverse

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Feature name -> config subtree, in rendering order.
CONFIG_TEMPLATES: tuple[tuple[str, str], ...] = (
    ("jsx", "config/jsx"),
    ("router", "config/router"),
    ("vuex", "config/vuex"),
    ("tests", "config/cypress"),
    ("typescript", "config/typescript"),
)

TEST_DIRECTORY_NAMES: frozenset[str] = frozenset({"cypress", "__tests__"})

INITIAL_VERSION = "0.0.0"


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Scaffolds one project described by a ``ScaffoldConfig``.

    The generator owns the project root for the duration of ``generate``.
    It never deletes the root itself; when ``should_overwrite`` is set the
    root is emptied before anything is rendered.
    """

    def __init__(self, config: ScaffoldConfig) -> None:
        self.config = config
        self.renderer = TemplateRenderer(config.template_root)

    # -- Public API --------------------------------------------------------

    def generate(self) -> Path:
        """Generate the project and return its root directory.

        Raises:
            ScaffoldError: If a required template subtree is missing; nothing
                is written in that case.
        """
        root = self.config.root
        sequence = self.template_sequence()

        missing = [name for name in sequence if not self.renderer.has_template(name)]
        if missing:
            raise ScaffoldError(
                f"Missing template(s) {', '.join(missing)} in {self.renderer.template_dir}"
            )

        self.prepare_root(root)
        self.write_initial_manifest(root)

        for template_name in sequence:
            self.renderer.render(template_name, root)

        if self.config.features.typescript:
            self.convert_to_typescript(root)

        if not self.config.features.tests:
            self.remove_test_directories(root)

        self.write_readme(root)
        logger.debug("Scaffolded %s", root)
        return root

    def template_sequence(self) -> list[str]:
        """Return the template subtrees to render, in rendering order."""
        features = self.config.features
        sequence = ["base"]
        sequence.extend(
            template for feature, template in CONFIG_TEMPLATES if getattr(features, feature)
        )
        sequence.append(self.config.code_template)
        sequence.append(self.config.entry_template)
        return sequence

    # -- Steps -------------------------------------------------------------

    def prepare_root(self, root: Path) -> None:
        """Empty *root* if overwriting was confirmed, otherwise make sure it exists."""
        if self.config.should_overwrite and root.exists():
            empty_dir(root)
        elif not root.exists():
            root.mkdir(parents=True)

    def write_initial_manifest(self, root: Path) -> None:
        pkg = {"name": self.config.package_name, "version": INITIAL_VERSION}
        save_json(pkg, root / "package.json")

    def convert_to_typescript(self, root: Path) -> None:
        """Rename ``*.js`` to ``*.ts`` and ``jsconfig.json`` to ``tsconfig.json``.

        The script entry in ``index.html`` is updated to point at
        ``src/main.ts``.
        """

        def rename_file(filepath: Path) -> None:
            if filepath.name.endswith(".js"):
                target = filepath.with_name(filepath.name[: -len(".js")] + ".ts")
            elif filepath.name == "jsconfig.json":
                target = filepath.with_name("tsconfig.json")
            else:
                return
            filepath.rename(target)
            logger.debug("Renamed %s -> %s", filepath, target.name)

        pre_order_directory_traverse(root, lambda _dirpath: None, rename_file)

        index_html = root / "index.html"
        if index_html.exists():
            content = index_html.read_text(encoding="utf-8")
            index_html.write_text(
                content.replace("src/main.js", "src/main.ts", 1), encoding="utf-8"
            )

    def remove_test_directories(self, root: Path) -> None:
        """Delete every ``cypress`` and ``__tests__`` directory under *root*.

        All templates assume tests are wanted; this strips them back out.
        """

        def prune(dirpath: Path) -> None:
            if dirpath.name in TEST_DIRECTORY_NAMES:
                empty_dir(dirpath)
                dirpath.rmdir()
                logger.debug("Removed test directory %s", dirpath)

        pre_order_directory_traverse(root, prune, lambda _filepath: None)

    def write_readme(self, root: Path) -> None:
        content = generate_readme(
            project_name=self.config.project_name,
            package_manager=self.config.package_manager,
            needs_typescript=self.config.features.typescript,
            needs_tests=self.config.features.tests,
            renderer=self.renderer,
        )
        (root / "README.md").write_text(content, encoding="utf-8")
