import sys

from .cli.command_processor import main

if __name__ == '__main__':
    sys.exit(main())
