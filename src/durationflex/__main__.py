import sys

from durationflex.cli import main

sys.exit(main())
