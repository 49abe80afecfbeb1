import sys

from docindex.main import main

if __name__ == "__main__":
    sys.exit(main())
