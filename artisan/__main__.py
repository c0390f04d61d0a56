"""Allow ``python -m artisan``."""

import sys

from artisan.cli import main

sys.exit(main())
