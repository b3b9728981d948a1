"""README.md generation for scaffolded projects."""

from __future__ import annotations

from ..utils import get_command
from .templates import TemplateRenderer

_README_TEMPLATE = """\
# {{ project_name }}

This template should help get you started developing with Vue 3 in Vite.

## Recommended IDE Setup

[VSCode](https://code.visualstudio.com/) + [Volar](https://marketplace.visualstudio.com/items?itemName=johnsoncodehk.volar) (and disable Vetur).
{% if needs_typescript %}

## Type Support for `.vue` Imports in TS

Since TypeScript cannot handle type information for `.vue` imports, they are shimmed to be a generic Vue component type by default. In most cases this is fine if you don't really care about component prop types outside of templates. However, if you wish to get actual prop types in `.vue` imports (for example to get props validation when using manual `h(...)` calls), you can enable Volar's `.vue` type support plugin by running `Volar: Switch TS Plugin on/off` from VSCode command palette.
{% endif %}

## Customize configuration

See [Vite Configuration Reference](https://vitejs.dev/config/).

## Project Setup

```sh
{{ install_command }}
```

### Compile and Hot-Reload for Development

```sh
{{ dev_command }}
```

### {{ "Type-Check, Compile and Minify for Production" if needs_typescript else "Compile and Minify for Production" }}

```sh
{{ build_command }}
```
{% if needs_tests %}

### Run Unit Tests with [Cypress Component Testing](https://docs.cypress.io/guides/component-testing/introduction)

```sh
{{ unit_test_command }}
```

### Run End-to-End Tests with [Cypress](https://www.cypress.io/)

```sh
{{ build_command }}
{{ e2e_test_command }}
```
{% endif %}
"""


def generate_readme(
    project_name: str,
    package_manager: str,
    needs_typescript: bool = False,
    needs_tests: bool = False,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Return the README.md content for a freshly scaffolded project.

    Commands are formatted for *package_manager*; the TypeScript and testing
    sections only appear when the matching feature was selected.
    """
    renderer = renderer or TemplateRenderer()
    context = {
        "project_name": project_name,
        "needs_typescript": needs_typescript,
        "needs_tests": needs_tests,
        "install_command": get_command(package_manager, "install"),
        "dev_command": get_command(package_manager, "dev"),
        "build_command": get_command(package_manager, "build"),
        "unit_test_command": get_command(package_manager, "test:unit"),
        "e2e_test_command": get_command(package_manager, "test:e2e"),
    }
    return renderer.render_string(_README_TEMPLATE, context)
