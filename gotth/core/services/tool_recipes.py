"""
Tool recipes — the catalog of tools a project needs and how to install them.

Order matters: dependencies are checked top to bottom, and Go comes
first because templ and air are installed with ``go install``.
"""

from __future__ import annotations

from gotth.core.models.tool import ToolSpec

BUN_INSTALL_URL = "https://bun.sh/install"

TOOL_RECIPES: dict[str, ToolSpec] = {
    "go": ToolSpec(
        id="go",
        label="Go",
        cli="go",
        required_msg="Go not found",
    ),
    "bun": ToolSpec(
        id="bun",
        label="Bun",
        cli="bun",
        fallback=".bun/bin/bun",
        install_kind="script",
        install_cmd=["bash", "-c", f"curl -fsSL {BUN_INSTALL_URL} | bash"],
        required_msg="Bun is required.",
    ),
    "templ": ToolSpec(
        id="templ",
        label="Templ",
        cli="templ",
        go_bin=True,
        install_kind="go",
        install_cmd=["install", "github.com/a-h/templ/cmd/templ@latest"],
        required_msg="Templ is required.",
    ),
    "air": ToolSpec(
        id="air",
        label="Air",
        cli="air",
        go_bin=True,
        install_kind="go",
        install_cmd=["install", "github.com/air-verse/air@latest"],
        required_msg="Air is required for dev mode.",
    ),
    "watchman": ToolSpec(
        id="watchman",
        label="Watchman",
        cli="watchman",
        install_kind="system",
        package="watchman",
        purpose="required for Tailwind",
        required_msg="Watchman is required.",
    ),
}

# Probed in this order; the first one on PATH wins.
PACKAGE_MANAGERS: tuple[str, ...] = ("pacman", "apt-get", "dnf", "brew")


def build_pkg_install_cmds(package: str, pm: str) -> list[list[str]]:
    """Build the command sequence that installs *package* with *pm*.

    Commands are returned without a sudo prefix; see
    ``pm_needs_sudo()``.
    """
    if pm == "pacman":
        return [["pacman", "-S", package]]
    if pm == "apt-get":
        return [
            ["apt-get", "update"],
            ["apt-get", "install", "-y", package],
        ]
    if pm == "dnf":
        return [["dnf", "install", "-y", package]]
    if pm == "brew":
        return [["brew", "install", package]]
    raise ValueError(f"No install command for package manager: {pm}")


def pm_needs_sudo(pm: str) -> bool:
    # Homebrew refuses to run as root.
    return pm != "brew"
