"""Allow ``python -m cppforge``."""

import sys

from cppforge.cli import main

sys.exit(main())
