"""
git-branch-sweeper - Delete local branches whose GitHub pull requests are done
"""

from .__version__ import __version__
from .core import BranchSweeper
from .cli.main import main

__all__ = ["BranchSweeper", "main", "__version__"]
