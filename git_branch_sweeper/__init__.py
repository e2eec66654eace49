"""
git-branch-sweeper - Delete merged and stale git branches safely
"""

from .__version__ import __version__
from .core import BranchSweeper
from .cli.main import main

__all__ = ["BranchSweeper", "main", "__version__"]
