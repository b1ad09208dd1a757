"""Bolt post-install hooks.

- post-autoload-dump: install the back-end assets into the web root
- post-create-project-cmd: install the default files and themes

Target directories come from the bootstrapped application when available,
otherwise from BOLT_* environment variables or the manifest's extra section.
"""

__all__ = []
