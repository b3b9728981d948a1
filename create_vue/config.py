"""create-vue configuration.

A ``ScaffoldConfig`` is the finalized set of answers the scaffolder needs:
where to write, what to call the package, which optional features to add and
whether an existing directory may be emptied.  The CLI builds one from flags
and prompts; library callers can construct it directly.  Process-wide state
(working directory, environment) is captured explicitly on the model so the
generator never reads it on its own.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from .utils import PACKAGE_MANAGERS, detect_package_manager, is_valid_package_name

DEFAULT_PROJECT_NAME = "vue-project"
DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent / "template"


class FeatureFlags(BaseModel):
    """Optional features selected for the generated project."""

    typescript: bool = Field(default=False, description="Use TypeScript instead of JavaScript")
    jsx: bool = Field(default=False, description="Add JSX support")
    router: bool = Field(default=False, description="Add Vue Router")
    vuex: bool = Field(default=False, description="Add Vuex for state management")
    tests: bool = Field(default=False, description="Add Cypress for testing")

    def enabled(self) -> list[str]:
        """Return the names of the enabled features in declaration order."""
        return [name for name, value in self.model_dump().items() if value]


class ScaffoldConfig(BaseModel):
    """Everything the generator needs to scaffold one project."""

    project_name: str = Field(default=DEFAULT_PROJECT_NAME)
    target_dir: str = Field(default=DEFAULT_PROJECT_NAME)
    package_name: str = Field(default=DEFAULT_PROJECT_NAME)
    cwd: Path = Field(default_factory=Path.cwd)
    should_overwrite: bool = Field(
        default=False, description="Empty an existing target directory before rendering"
    )
    features: FeatureFlags = Field(default_factory=FeatureFlags)
    template_root: Path = Field(default=DEFAULT_TEMPLATE_DIR)
    package_manager: str = Field(default="npm")

    @field_validator("package_name")
    @classmethod
    def _check_package_name(cls, value: str) -> str:
        if not is_valid_package_name(value):
            raise ValueError(f"Invalid package.json name: {value!r}")
        return value

    @field_validator("package_manager")
    @classmethod
    def _check_package_manager(cls, value: str) -> str:
        if value not in PACKAGE_MANAGERS:
            raise ValueError(
                f"Unsupported package manager {value!r}; expected one of {PACKAGE_MANAGERS}"
            )
        return value

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def root(self) -> Path:
        """Absolute path of the project directory."""
        return (self.cwd / self.target_dir).resolve()

    @property
    def code_template(self) -> str:
        """Code subtree, e.g. ``code/typescript-router``."""
        prefix = "typescript-" if self.features.typescript else ""
        variant = "router" if self.features.router else "default"
        return f"code/{prefix}{variant}"

    @property
    def entry_template(self) -> str:
        """Entry-point subtree providing ``src/main.js``."""
        if self.features.vuex and self.features.router:
            return "entry/vuex-and-router"
        if self.features.vuex:
            return "entry/vuex"
        if self.features.router:
            return "entry/router"
        return "entry/default"

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None, **overrides: Any) -> "ScaffoldConfig":
        """Build a config, detecting the package manager from *env*.

        Recognised variables: ``npm_execpath`` (set by npm, yarn and pnpm
        when they run a package binary).  *env* defaults to ``os.environ``.
        """
        environ = os.environ if env is None else env
        overrides.setdefault(
            "package_manager", detect_package_manager(environ.get("npm_execpath"))
        )
        return cls(**overrides)
