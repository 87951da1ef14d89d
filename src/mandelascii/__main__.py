"""Command-line interface."""
from mandelascii.main import main

if __name__ == "__main__":
    main()
