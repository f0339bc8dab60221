"""Minimal version helper for the rotacrop package."""

from importlib import metadata

PACKAGE_NAME = "rotacrop"
FALLBACK_VERSION = "0.0.0"


def get_version() -> str:
    """
    Get version for the package.

    :return: Version number.
    """
    try:
        return metadata.version(PACKAGE_NAME)
    except metadata.PackageNotFoundError:  # source checkout
        pass
    try:
        import setuptools_scm  # type: ignore[import-untyped]

        return str(setuptools_scm.get_version(root="../..", relative_to=__file__))
    except (ImportError, LookupError):
        return FALLBACK_VERSION


__all__ = ["get_version"]
