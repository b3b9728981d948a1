"""create-vue -- scaffold Vue 3 + Vite projects from template trees.

Quick usage::

    from create_vue.config import FeatureFlags, ScaffoldConfig
    from create_vue.scaffolder import ProjectGenerator

    config = ScaffoldConfig(
        target_dir="my-app",
        features=FeatureFlags(typescript=True, router=True),
    )
    project_path = ProjectGenerator(config).generate()
"""

__version__ = "0.1.0"
