import sys

from platpick.cli import main

sys.exit(main())
