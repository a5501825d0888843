"""Documentation site build package.

This module is the root of the ``docsite`` package, which turns a tree of
markdown and HTML content files into the static documentation website.

Package Structure
-----------------
- `site_config.py`:
    The explicit site configuration: passthrough copies, sorted collections,
    template helpers and markdown render rules.
- `pipeline/`:
    Self-contained subpackages for collection sorting, template helpers,
    markdown rendering overrides and the site builder itself.
- `config.py`: All configuration constants (paths, css tokens, log format), as UPPER_SNAKE_CASE.
- `exceptions.py`: All project-specific exception classes.

Examples
--------
>>> from docsite.site_config import configure_site
>>> site = configure_site()
>>> "guidesSorted" in site.collections
True
"""
