import sys

from thunderman.cli import main

sys.exit(main())
