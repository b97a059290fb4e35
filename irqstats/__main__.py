import sys

from irqstats.cli import main

sys.exit(main())
