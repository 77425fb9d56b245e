"""AI commit message and pull-request summary generator."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("commitmuse")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
