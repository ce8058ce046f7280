"""Allow ``python -m xml_determiner``."""

import sys

from xml_determiner.cli import main

sys.exit(main())
