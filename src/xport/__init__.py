"""Find which process holds a local port and stop it."""

import pathlib
import sys
from importlib.metadata import PackageNotFoundError, version

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


def _source_tree_version() -> str | None:
    for parent in pathlib.Path(__file__).parents:
        pyproject_path = parent / "pyproject.toml"
        if not pyproject_path.is_file():
            continue
        with pyproject_path.open("rb") as f:
            project = tomllib.load(f).get("project", {})
        if project.get("name") == "xport":
            return project.get("version")
    return None


def get_version() -> str:
    """Installed distribution version, else the one in the source checkout."""
    try:
        return version("xport")
    except PackageNotFoundError:
        return _source_tree_version() or "0.0.0"


__version__ = get_version()
