"""``python -m src.demo``"""

import sys

from src.demo.cli import main

sys.exit(main())
