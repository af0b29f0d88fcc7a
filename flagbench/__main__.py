import sys

from flagbench.cli import main

sys.exit(main())
