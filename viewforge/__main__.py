"""Allow ``python -m viewforge``."""

from .cli import main

if __name__ == '__main__':
    main()
