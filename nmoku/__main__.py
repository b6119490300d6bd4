import sys

from nmoku.app import main

sys.exit(main())
