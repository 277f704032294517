import sys

from clistudy.cli import main

sys.exit(main())
