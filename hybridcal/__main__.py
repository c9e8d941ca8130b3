"""Allow ``python -m hybridcal``."""

from __future__ import annotations

import sys

from hybridcal.cli import main

sys.exit(main())
