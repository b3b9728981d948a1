"""Template rendering for project scaffolding.

Renders a template folder/file to the file system by recursively copying
everything under the source directory, with two exceptions:

- ``_filename`` is written as ``.filename``
- ``package.json`` is deep-merged into an existing destination manifest
  instead of overwriting it

The ``TemplateRenderer`` class binds this to a template root (by default the
``template/`` directory shipped with the package) and also exposes a Jinja2
environment for inline string templates such as the generated README.
"""

from __future__ import annotations

import json
import logging
import os
import shutil
import stat
from pathlib import Path
from typing import Any

from jinja2 import Environment

from ..config import DEFAULT_TEMPLATE_DIR
from .errors import ManifestParseError
from .merge import deep_merge, sort_dependencies

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Template conventions
# ---------------------------------------------------------------------------

MANIFEST_FILENAME = "package.json"
HIDDEN_FILE_MARKER = "_"


# ---------------------------------------------------------------------------
# Core algorithm
# ---------------------------------------------------------------------------


def render_template(src: str | Path, dest: str | Path) -> None:
    """Render the template at *src* into *dest*.

    Directories are recreated (idempotently) and rendered child by child in
    listing order.  Files are copied byte for byte, overwriting whatever is
    at the destination, unless one of the manifest or hidden-file rules
    applies.

    Raises:
        FileNotFoundError: If *src* does not exist.
        ManifestParseError: If either side of a manifest merge is not a
            JSON object.
    """
    src = Path(src)
    dest = Path(dest)

    if stat.S_ISDIR(src.stat().st_mode):
        dest.mkdir(parents=True, exist_ok=True)
        for name in os.listdir(src):
            render_template(src / name, dest / name)
        return

    filename = src.name

    if filename == MANIFEST_FILENAME and dest.exists():
        _merge_manifest(src, dest)
        return

    if filename.startswith(HIDDEN_FILE_MARKER):
        dest = dest.parent / ("." + filename[len(HIDDEN_FILE_MARKER):])

    shutil.copyfile(src, dest)
    shutil.copymode(src, dest)


def _merge_manifest(src: Path, dest: Path) -> None:
    existing = read_manifest(dest)
    new_package = read_manifest(src)
    pkg = sort_dependencies(deep_merge(existing, new_package))
    write_manifest(pkg, dest)
    logger.debug("Merged %s into %s", src, dest)


def read_manifest(path: str | Path) -> dict[str, Any]:
    """Parse a manifest file, which must hold a JSON object.

    Raises:
        ManifestParseError: On malformed JSON or a non-object document.
    """
    raw = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ManifestParseError(path, str(exc)) from exc
    if not isinstance(data, dict):
        raise ManifestParseError(path, f"expected a JSON object, got {type(data).__name__}")
    return data


def write_manifest(data: dict[str, Any], path: str | Path) -> None:
    """Serialise *data* with two-space indentation and a trailing newline."""
    content = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    Path(path).write_text(content, encoding="utf-8")


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders named template subtrees from a template root.

    Subtree names are paths relative to the root, e.g. ``"base"``,
    ``"config/router"`` or ``"entry/vuex-and-router"``.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    # -- Tree rendering ----------------------------------------------------

    def render(self, template_name: str, dest: str | Path) -> None:
        """Render the subtree *template_name* into *dest*."""
        template_path = self.template_dir / template_name
        logger.debug("Rendering template %s -> %s", template_name, dest)
        render_template(template_path, dest)

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline Jinja2 template string with the provided context."""
        template = self.env.from_string(template_string)
        return template.render(**context)

    # -- Utility -----------------------------------------------------------

    def has_template(self, template_name: str) -> bool:
        return (self.template_dir / template_name).is_dir()

    def list_templates(self) -> list[str]:
        """Return the sorted names of all renderable subtrees.

        ``base`` is a top-level subtree; ``config``, ``code`` and ``entry``
        are groups whose children are the renderable subtrees.
        """
        if not self.template_dir.is_dir():
            return []

        names: list[str] = []
        for child in sorted(self.template_dir.iterdir()):
            if not child.is_dir():
                continue
            if child.name == "base":
                names.append("base")
                continue
            names.extend(
                f"{child.name}/{sub.name}"
                for sub in sorted(child.iterdir())
                if sub.is_dir()
            )
        return names
