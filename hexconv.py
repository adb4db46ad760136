#!/usr/bin/python3

"""
Entry point script for hexdump2.
"""

from src.hexdump2.__main__ import main


if __name__ == "__main__":
    main()
