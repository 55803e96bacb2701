import sys

from govcmcp.cli import main

sys.exit(main())
