import sys

from skl2dx.presentation.cli.make_dx import main

if __name__ == "__main__":
    sys.exit(main())
