import sys

from patternkit.cli.main import main

sys.exit(main())
