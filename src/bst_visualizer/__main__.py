import sys

from bst_visualizer.cli import main

sys.exit(main())
