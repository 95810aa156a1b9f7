"""Allow running as ``python -m git_branch_sweeper``."""

import sys

from git_branch_sweeper.cli.main import main

sys.exit(main())
