#!/usr/bin/env python3
"""
domains - Main Entry Point

Runs the command-line interface without installing the package.
"""

from domains_cli.cli.main import main

if __name__ == "__main__":
    main()
