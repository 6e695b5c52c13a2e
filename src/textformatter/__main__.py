"""Allow ``python -m textformatter``."""

import sys

from .cli import main

sys.exit(main())
