"""Use: python -m bouncer"""

import sys

from bouncer.main import main

if __name__ == "__main__":
    sys.exit(main())
