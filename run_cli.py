#!/usr/bin/env python3
"""
Up Bank client CLI runner.
"""
from upbank.cli.main import cli

if __name__ == "__main__":
    cli()
