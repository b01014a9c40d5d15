"""
Interaction hooks — how core services talk to the user without knowing
about the terminal.

The CLI passes real implementations (a yes/no prompt defaulting to
"no", and coloured output). The defaults here are non-interactive:
every prompt is answered "no" and messages go to the log.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Literal, Protocol

logger = logging.getLogger(__name__)

NoticeKind = Literal["section", "info", "done"]

Confirm = Callable[[str], bool]


class Notify(Protocol):
    def __call__(self, message: str, kind: NoticeKind = "info") -> None: ...


def deny(prompt: str) -> bool:
    """Answer every prompt with "no"."""
    logger.info("%s -> no (non-interactive)", prompt)
    return False


def log_notify(message: str, kind: NoticeKind = "info") -> None:
    logger.info("%s", message)
