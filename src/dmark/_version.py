"""Version lookup for dmark."""

import tomllib
from importlib import metadata
from pathlib import Path

DISTRIBUTION = "dmark"

# src/dmark/_version.py -> repository root
_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    """
    Return the dmark version.

    A source checkout reports the version declared in its pyproject.toml, so
    an editable install never lags behind the file. Otherwise the installed
    distribution metadata is used.
    """
    if _PYPROJECT.is_file():
        with open(_PYPROJECT, "rb") as f:
            project = tomllib.load(f).get("project", {})
        if project.get("name") == DISTRIBUTION and "version" in project:
            return str(project["version"])

    try:
        return metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return "0.0.0"
