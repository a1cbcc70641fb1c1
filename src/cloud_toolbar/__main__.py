"""Allow ``python -m cloud_toolbar``."""
# Author: Rich Lewis - GitHub: @RichLewis007

import sys

from .app import main

sys.exit(main())
