"""Allow ``python -m sv_modular``."""

import sys

from sv_modular.cli import main

sys.exit(main())
