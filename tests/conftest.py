"""Shared pytest fixtures for the create-vue test suite.

Provides reusable fixtures for:
- Temporary project and template directories
- A helper that materialises a ``{relative_path: content}`` mapping on disk
- A small template tree mirroring the packaged layout
- Sample ``package.json`` documents
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Temporary destination directory for generated projects."""
    project_dir = tmp_path / "test-project"
    project_dir.mkdir()
    yield project_dir


@pytest.fixture
def make_tree() -> Callable[[Path, dict[str, str | bytes | dict[str, Any]]], Path]:
    """Return a helper that writes a ``{relative_path: content}`` mapping.

    ``str`` values are written as text, ``bytes`` as-is and ``dict`` values as
    two-space indented JSON.  A path ending in ``/`` creates an empty
    directory.
    """

    def _make(root: Path, files: dict[str, str | bytes | dict[str, Any]]) -> Path:
        root.mkdir(parents=True, exist_ok=True)
        for rel_path, content in files.items():
            target = root / rel_path
            if rel_path.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                target.write_bytes(content)
            elif isinstance(content, dict):
                target.write_text(json.dumps(content, indent=2), encoding="utf-8")
            else:
                target.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def sample_tree(tmp_path: Path, make_tree) -> Path:
    """A nested directory tree used by the traversal tests.

    Layout::

        tree/
            a.txt
            dir1/
                b.txt
                sub/
                    c.txt
            dir2/
                __tests__/
                    d.spec.js
            empty/
    """
    return make_tree(
        tmp_path / "tree",
        {
            "a.txt": "a",
            "dir1/b.txt": "b",
            "dir1/sub/c.txt": "c",
            "dir2/__tests__/d.spec.js": "d",
            "empty/": "",
        },
    )


# ---------------------------------------------------------------------------
# Template trees
# ---------------------------------------------------------------------------

@pytest.fixture
def template_root(tmp_path: Path, make_tree) -> Path:
    """A minimal template root with the same layout as the packaged one."""
    return make_tree(
        tmp_path / "template",
        {
            "base/package.json": {
                "scripts": {"dev": "vite", "build": "vite build"},
                "dependencies": {"vue": "^3.2.21"},
                "devDependencies": {"vite": "^2.6.14"},
            },
            "base/_gitignore": "node_modules\ndist\n",
            "base/index.html": '<script type="module" src="/src/main.js"></script>\n',
            "base/jsconfig.json": '{"compilerOptions": {}}\n',
            "base/vite.config.js": "export default {}\n",
            "config/jsx/package.json": {"devDependencies": {"@vitejs/plugin-vue-jsx": "^1.2.4"}},
            "config/router/package.json": {"dependencies": {"vue-router": "^4.0.12"}},
            "config/vuex/package.json": {"dependencies": {"vuex": "^4.0.2"}},
            "config/cypress/package.json": {
                "scripts": {"test:e2e": "cypress open"},
                "devDependencies": {"cypress": "^8.7.0"},
            },
            "config/cypress/cypress/integration/example.spec.js": "describe('x', () => {})\n",
            "config/typescript/package.json": {"devDependencies": {"typescript": "~4.4.4"}},
            "config/typescript/env.d.ts": "/// <reference types=\"vite/client\" />\n",
            "code/default/src/App.vue": "<template>default</template>\n",
            "code/default/src/components/__tests__/App.spec.js": "it('works')\n",
            "code/router/src/App.vue": "<template>router</template>\n",
            "code/router/src/views/HomeView.vue": "<template>home</template>\n",
            "code/typescript-default/src/App.vue": "<template>ts-default</template>\n",
            "code/typescript-router/src/App.vue": "<template>ts-router</template>\n",
            "entry/default/src/main.js": "// default entry\n",
            "entry/router/src/main.js": "// router entry\n",
            "entry/router/src/router/index.js": "// router\n",
            "entry/vuex/src/main.js": "// vuex entry\n",
            "entry/vuex/src/store/index.js": "// store\n",
            "entry/vuex-and-router/src/main.js": "// vuex + router entry\n",
            "entry/vuex-and-router/src/router/index.js": "// router\n",
            "entry/vuex-and-router/src/store/index.js": "// store\n",
        },
    )


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_manifest() -> dict[str, Any]:
    """A realistic package.json with unsorted dependency maps."""
    return {
        "name": "demo",
        "version": "0.0.0",
        "scripts": {"dev": "vite", "build": "vite build"},
        "dependencies": {"vue": "^3.2.21", "axios": "^0.24.0"},
        "devDependencies": {"vite": "^2.6.14", "@vitejs/plugin-vue": "^1.9.4"},
        "keywords": ["vue", "vite"],
    }
