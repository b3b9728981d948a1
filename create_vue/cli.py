"""create-vue command-line interface.

Parses flags, asks the remaining questions interactively and hands the
finalized ``ScaffoldConfig`` to ``ProjectGenerator``.  All prompting happens
before anything is written, so cancelling never leaves a half-rendered
project behind.

Usage::

    python -m create_vue.cli my-app
    python -m create_vue.cli my-app --ts --router --tests
    python -m create_vue.cli . --default --force
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path

from rich.markup import escape
from rich.prompt import Confirm, Prompt

from create_vue.config import DEFAULT_PROJECT_NAME, FeatureFlags, ScaffoldConfig
from create_vue.scaffolder import OperationCancelledError, ProjectGenerator, ScaffoldError
from create_vue.utils import (
    can_safely_overwrite,
    console,
    get_command,
    is_valid_package_name,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
    to_valid_package_name,
)

# Feature name -> prompt, in the order the questions are asked.
FEATURE_PROMPTS: dict[str, str] = {
    "typescript": "Add TypeScript?",
    "jsx": "Add JSX Support?",
    "router": "Add Vue Router for Single Page Application development?",
    "vuex": "Add Vuex for state management?",
    "tests": "Add Cypress for testing?",
}


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-vue",
        description="Scaffold a Vue 3 + Vite project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-vue my-app\n"
            "  create-vue my-app --ts --router --tests\n"
            "  create-vue . --default --force\n"
        ),
    )

    parser.add_argument(
        "target",
        nargs="?",
        default=None,
        help="Directory to create the project in (prompted if omitted)",
    )
    parser.add_argument(
        "--default",
        action="store_true",
        default=None,
        help="Skip feature prompts and use the defaults (no optional features)",
    )
    flag = argparse.BooleanOptionalAction
    parser.add_argument("--typescript", "--ts", dest="typescript", action=flag, default=None)
    parser.add_argument("--jsx", dest="jsx", action=flag, default=None)
    parser.add_argument("--router", "--vue-router", dest="router", action=flag, default=None)
    parser.add_argument("--vuex", dest="vuex", action=flag, default=None)
    parser.add_argument(
        "--with-tests", "--tests", "--cypress", dest="tests", action=flag, default=None
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Empty a non-empty target directory without asking",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every rendered template, merge and rename",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def feature_flags_used(args: argparse.Namespace) -> bool:
    """Return ``True`` if any feature flag was given on the command line.

    ``--no-<feature>`` counts too: once a flag is used, every unspecified
    feature is off and no feature prompt is shown.
    """
    names = ("default", *FEATURE_PROMPTS)
    return any(getattr(args, name, None) is not None for name in names)


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------


def collect_config(
    args: argparse.Namespace,
    cwd: str | Path | None = None,
    env: Mapping[str, str] | None = None,
) -> ScaffoldConfig:
    """Turn parsed flags plus interactive answers into a ``ScaffoldConfig``.

    Raises:
        OperationCancelledError: If the user declines to overwrite a
            non-empty directory or interrupts a prompt.
    """
    work_dir = Path(cwd) if cwd is not None else Path.cwd()

    try:
        target_dir = args.target
        if not target_dir:
            answer = Prompt.ask("Project name", default=DEFAULT_PROJECT_NAME, console=console)
            target_dir = answer.strip() or DEFAULT_PROJECT_NAME

        root = (work_dir / target_dir).resolve()
        should_overwrite = False
        if not can_safely_overwrite(root):
            if args.force:
                should_overwrite = True
            else:
                label = (
                    "Current directory" if target_dir == "." else f'Target directory "{target_dir}"'
                )
                should_overwrite = Confirm.ask(
                    f"{escape(label)} is not empty. Remove existing files and continue?",
                    default=False,
                    console=console,
                )
                if not should_overwrite:
                    raise OperationCancelledError()

        package_name = root.name
        if not is_valid_package_name(package_name):
            package_name = _ask_package_name(to_valid_package_name(package_name))

        features = _ask_features(args)
    except (KeyboardInterrupt, EOFError) as exc:
        raise OperationCancelledError() from exc

    return ScaffoldConfig.from_env(
        env,
        project_name=target_dir,
        target_dir=target_dir,
        package_name=package_name,
        cwd=work_dir,
        should_overwrite=should_overwrite,
        features=features,
    )


def _ask_package_name(initial: str) -> str:
    while True:
        answer = Prompt.ask("Package name", default=initial, console=console).strip()
        if is_valid_package_name(answer):
            return answer
        print_error("Invalid package.json name")


def _ask_features(args: argparse.Namespace) -> FeatureFlags:
    if feature_flags_used(args):
        return FeatureFlags(**{name: bool(getattr(args, name)) for name in FEATURE_PROMPTS})

    answers = {
        name: Confirm.ask(question, default=False, console=console)
        for name, question in FEATURE_PROMPTS.items()
    }
    return FeatureFlags(**answers)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def print_next_steps(root: Path, cwd: Path, package_manager: str) -> None:
    """Tell the user how to start working in the new project."""
    print_success("\nDone. Now run:\n")
    cwd = cwd.resolve()
    if root != cwd:
        console.print(f"  [bold green]cd {escape(os.path.relpath(root, cwd))}[/bold green]")
    console.print(f"  [bold green]{get_command(package_manager, 'install')}[/bold green]")
    console.print(f"  [bold green]{get_command(package_manager, 'dev')}[/bold green]")
    console.print()


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``create-vue``."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = collect_config(args)
    except OperationCancelledError as exc:
        print_error(f"✖ {exc}")
        sys.exit(1)

    if config.should_overwrite:
        print_warning(f"Removing existing files in {escape(str(config.root))}")

    if args.verbose:
        print_summary_table(
            {
                "Project": config.project_name,
                "Package": config.package_name,
                "Features": ", ".join(config.features.enabled()) or "none",
                "Package manager": config.package_manager,
            },
            title="Scaffold",
        )

    console.print(f"\nScaffolding project in {escape(str(config.root))}...")

    try:
        root = ProjectGenerator(config).generate()
    except (ScaffoldError, OSError) as exc:
        print_error(f"Error: {escape(str(exc))}")
        sys.exit(1)

    print_next_steps(root, config.cwd, config.package_manager)


if __name__ == "__main__":
    main()
