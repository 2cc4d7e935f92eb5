"""Allow ``python -m xadreis``."""

from xadreis.app import main

if __name__ == "__main__":
    main()
