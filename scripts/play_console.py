#!/usr/bin/env python3
"""Play Morpion in the console, against a friend or an AI."""

from morpion.app import main


if __name__ == "__main__":
    main()
