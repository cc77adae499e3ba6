"""Allow ``python -m dijkstrax``."""

import sys

from .cli import main

sys.exit(main())
