"""Version information for git-branch-sweeper."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("git-branch-sweeper")
except PackageNotFoundError:
    # Running from a source checkout without installation
    __version__ = "0.0.0+unknown"
