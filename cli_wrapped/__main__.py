"""Allow ``python -m cli_wrapped``."""

import sys

from cli_wrapped.cli.commands import main

sys.exit(main())
