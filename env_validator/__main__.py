#!/usr/bin/env python3
"""
Enable execution of the env_validator package as a module.

This allows running the package with: python -m env_validator
"""

from .cli.main import main

if __name__ == "__main__":
    main()
