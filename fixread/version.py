from __future__ import annotations

import importlib.metadata
import subprocess
from pathlib import Path
from typing import NamedTuple, Optional


class BuildInfo(NamedTuple):
    version: str
    commit: Optional[str]
    date: Optional[str]


def _package_version() -> str:
    try:
        return importlib.metadata.version("fixread")
    except importlib.metadata.PackageNotFoundError:
        return "0+unknown"


def _run_git(args: list[str], cwd: Path) -> Optional[str]:
    try:
        out = subprocess.check_output(["git", *args], cwd=str(cwd), stderr=subprocess.DEVNULL)
        return out.decode().strip() or None
    except (subprocess.CalledProcessError, FileNotFoundError, OSError):
        return None


def _from_git_repo() -> tuple[Optional[str], Optional[str]]:
    here = Path(__file__).resolve().parent
    root = _run_git(["rev-parse", "--show-toplevel"], cwd=here)
    if not root:
        return (None, None)
    commit = _run_git(["rev-parse", "HEAD"], cwd=Path(root))
    date = _run_git(["show", "-s", "--format=%cI", "HEAD"], cwd=Path(root))
    return (commit, date)


def _from_embedded_file() -> tuple[Optional[str], Optional[str]]:
    # Generated at build time by hatch build hook
    try:
        from . import _build_info  # type: ignore
    except ImportError:
        return (None, None)
    return (getattr(_build_info, "COMMIT", None), getattr(_build_info, "DATE", None))


def get_build_info() -> BuildInfo:
    # Priority: live git repo -> embedded file -> unknowns
    for getter in (_from_git_repo, _from_embedded_file):
        commit, date = getter()
        if commit or date:
            return BuildInfo(_package_version(), commit, date)
    return BuildInfo(_package_version(), None, None)


def get_version_string() -> str:
    info = get_build_info()
    commit = info.commit[:7] if info.commit else "unknown"
    return f"fixread {info.version} ({commit} {info.date or 'unknown'})"
