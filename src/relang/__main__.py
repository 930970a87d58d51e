import sys

from relang.cli import main

sys.exit(main())
