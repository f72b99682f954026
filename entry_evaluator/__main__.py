"""Allow running entry-evaluator with ``python -m entry_evaluator``."""

import sys

from entry_evaluator.cli import main


sys.exit(main())
