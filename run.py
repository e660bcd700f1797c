import sys
from console_apps.cli import main

# Usage: python run.py [game|atm|grades]   (defaults to the number game)
if __name__ == '__main__':
    sys.exit(main())
