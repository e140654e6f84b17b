"""Allow ``python -m product_manager``."""

import sys

from product_manager.main import main


if __name__ == "__main__":
    sys.exit(main())
