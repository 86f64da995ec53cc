#!/usr/bin/env python3
"""
CLI entry point for the Product Configurator.
"""
import sys
from product_configurator.cli.configurator_cli import main

if __name__ == "__main__":
    sys.exit(main())
