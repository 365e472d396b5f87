"""
College allocation - command-line wrapper.

Equivalent to `python -m rank_counseling`; kept at the repository root so
the tool can be started without installing the package:

    python college_allocation.py

For programmatic use, import from the package:

    from rank_counseling import CollegeCounselor, Applicant
"""

import sys

from rank_counseling.cli import main

if __name__ == "__main__":
    sys.exit(main())
