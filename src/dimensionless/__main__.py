"""Launch the calculator GUI."""
import sys

from dimensionless.app.main import main

if __name__ == "__main__":
    sys.exit(main())
