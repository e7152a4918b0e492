"""
flutter_clean.templates - Jinja2 Template Files
===============================================

Templates for the two generated text files. Dart placeholder files are
created empty and need no template.

Available Templates
-------------------
- ARCHITECTURE.md.j2: architecture overview for the scaffolded project
- analysis_options.yaml.j2: flutter_lints include plus fixed linter rules

Template Context
----------------
``ARCHITECTURE.md.j2`` receives:

    config : ScaffoldConfig
        The resolved configuration

    core_dirs : tuple[str, ...]
        Core subdirectory names from the layout plan

    dependencies : DependencySet
        Runtime and dev pub packages

    flutter_clean_version : str
        Version of flutter-clean for attribution

``analysis_options.yaml.j2`` receives ``lint_rules``, a list of rule names.

Templates are loaded via Jinja2's PackageLoader:

>>> from jinja2 import Environment, PackageLoader
>>> env = Environment(loader=PackageLoader("flutter_clean", "templates"))
>>> env.get_template("analysis_options.yaml.j2")
<Template 'analysis_options.yaml.j2'>
"""
