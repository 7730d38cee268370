"""Version resolution from the installed package metadata."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("codebreaker")
except PackageNotFoundError:
    # source checkout without an installed distribution
    __version__ = "0.0.0"


__all__ = ["__version__"]
