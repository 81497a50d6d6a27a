import sys

from wizcraft.cli import main

sys.exit(main())
