import sys

from src.quasi.demo import main

if __name__ == "__main__":
    sys.exit(main())
