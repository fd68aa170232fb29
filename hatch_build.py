"""Hatchling build hook that stamps fixread with the commit being built."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Any, Optional

from hatchling.builders.hooks.plugin.interface import BuildHookInterface

BUILD_INFO_PATH = Path("fixread") / "_build_info.py"


def render_build_info(commit: Optional[str], date: Optional[str]) -> str:
    """Return the source of ``_build_info.py`` for ``commit`` and ``date``."""
    return (
        "# Auto-generated at build time.\n"
        f"COMMIT = {commit!r}\n"
        f"DATE = {date!r}\n"
    )


def run_git(args: list[str], cwd: Path) -> Optional[str]:
    """Run a git command in ``cwd`` and return its stripped output.

    Returns None when git is missing, the tree is not a checkout, or the
    command prints nothing.
    """
    try:
        out = subprocess.check_output(["git", *args], cwd=str(cwd), stderr=subprocess.DEVNULL)
        return out.decode().strip() or None
    except (subprocess.CalledProcessError, FileNotFoundError, OSError):
        # An sdist unpacked outside git still has to build
        return None


class CustomBuildHook(BuildHookInterface):
    """Write ``fixread/_build_info.py`` so installed copies know their commit.

    ``fixread.version`` reads the generated module when the package runs
    outside a git checkout.
    """

    def initialize(self, version: str, build_data: dict[str, Any]) -> None:
        """Generate the build info module and ship it as a build artifact."""
        self.write_build_info(Path(self.root))
        # Generated files are ignored by git, so list it explicitly
        build_data.setdefault("artifacts", []).append(BUILD_INFO_PATH.as_posix())

    @staticmethod
    def write_build_info(project_root: Path) -> Path:
        """Record HEAD's hash and commit date under ``project_root``."""
        commit = run_git(["rev-parse", "HEAD"], cwd=project_root)
        date = run_git(["show", "-s", "--format=%cI", "HEAD"], cwd=project_root)
        target_path = project_root / BUILD_INFO_PATH
        target_path.write_text(render_build_info(commit, date), encoding="utf-8")
        return target_path
