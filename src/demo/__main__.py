"""Allow ``python -m src.demo`` invocation."""

import sys

from src.demo.main import main

if __name__ == "__main__":
    sys.exit(main())
