#!/usr/bin/env python3
"""fixread - Read text files faster with fixation points.

Usage:
    python main.py FILE

Controls:
    a / q: Next / previous page
    /: Search, Enter to run it, n / p to move between matches
    Esc: Leave search, or quit
"""

import sys
from fixread.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
