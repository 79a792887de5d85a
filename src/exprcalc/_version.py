"""Version of the installed exprcalc distribution."""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    """Return the installed version, or ``0.0.0`` for an uninstalled source tree."""
    try:
        return version("exprcalc")
    except PackageNotFoundError:
        return "0.0.0"
