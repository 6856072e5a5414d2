"""Allow running tabvars with ``python -m tabvars``"""

from .main import main

if __name__ == "__main__":
    main()
