"""
Entry-point generator — placeholder ``cmd/<name>/main.go``.

The program only blocks on an HTTP listener so that air sees a
long-running process instead of one that exits immediately.
"""

from __future__ import annotations

from gotth.core.models.project import ProjectSettings
from gotth.core.models.template import GeneratedFile

_MAIN_GO = """\
package main

import "net/http"

func main() {{
\t// Simple blocking server so Air doesn't exit immediately
\thttp.ListenAndServe(":{port}", nil)
}}
"""


def render_main_go(settings: ProjectSettings) -> GeneratedFile:
    return GeneratedFile(
        path=settings.main_go,
        content=_MAIN_GO.format(port=settings.app_port),
        overwrite=False,
        reason="placeholder entry point",
    )
