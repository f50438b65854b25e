from importlib import metadata
from pathlib import Path

try:
    import tomllib
except ImportError:
    import tomli as tomllib

DISTRIBUTION_NAME = "eac-scheduling-sdk"


def _get_version() -> str:
    pyproject_path = Path(__file__).parent.parent / "pyproject.toml"

    try:
        with open(pyproject_path, "rb") as f:
            pyproject_data = tomllib.load(f)
        return str(pyproject_data["project"]["version"])
    except FileNotFoundError:
        # Installed without the source tree
        pass
    except (KeyError, tomllib.TOMLDecodeError) as e:
        raise ValueError("Failed to read version from pyproject.toml") from e

    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError as e:
        raise ValueError(f"Failed to read version of {DISTRIBUTION_NAME}") from e


SDK_VERSION = _get_version()
