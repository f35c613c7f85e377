import sys

from ripples.viewer.app import main

sys.exit(main())
