"""python -m freeblock runs the demo CLI."""
import sys

from freeblock.cli import main

sys.exit(main())
