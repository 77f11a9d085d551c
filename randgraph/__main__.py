import sys

from randgraph.cli import main

sys.exit(main())
