"""Allow running reqdoc as ``python -m reqdoc``."""

import sys

from reqdoc.cli import main

sys.exit(main())
