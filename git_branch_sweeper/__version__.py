"""Version information for git-branch-sweeper."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("git-branch-sweeper")
except PackageNotFoundError:
    # Fallback when running from a source checkout that was never installed
    __version__ = "0.0.0+unknown"
