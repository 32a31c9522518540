import sys

from satisfactory_saves.cli import main

if __name__ == '__main__':
    sys.exit(main())
