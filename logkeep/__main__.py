"""Run the logkeep CLI as a module."""

import sys

from logkeep.cli import main

sys.exit(main())
