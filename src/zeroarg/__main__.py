import sys

from zeroarg.cli import main

sys.exit(main())
