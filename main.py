import sys

from ripples.viewer.app import main

if __name__ == "__main__":
    sys.exit(main())
