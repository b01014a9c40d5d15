"""
Generators — produce project files from ProjectSettings.

Each generator module exposes a ``render_*()`` function that returns
a ``GeneratedFile``. Callers decide whether to write it.
"""
