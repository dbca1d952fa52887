"""Allow ``python -m byline_scraper``."""

import sys

from byline_scraper.cli import main

sys.exit(main())
