"""Allow ``python -m numscanengine``."""

import sys

from numscanengine.cli import main

sys.exit(main())
