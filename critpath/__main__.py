import sys

from critpath.cli import main

sys.exit(main())
