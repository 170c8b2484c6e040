import sys

from clock_timer.cli import main

sys.exit(main())
