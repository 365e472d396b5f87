"""Entry point for `python -m rank_counseling`."""

import sys

from .cli import main

sys.exit(main())
