#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Main entry point for running dev-cleanup as a module.
Example: python -m devcleanup --dry-run
"""

import sys
from devcleanup.cli import main

if __name__ == "__main__":
    sys.exit(main())
