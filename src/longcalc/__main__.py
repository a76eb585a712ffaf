import sys

from longcalc.cli import main

sys.exit(main())
