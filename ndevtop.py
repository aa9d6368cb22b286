#!/usr/bin/env python3
"""
ndevtop - live per-interface network throughput and packet rates.

Uses Textual TUI framework to show a sortable, filterable table of every
network device found under /sys/class/net.

This is the entry point script. The implementation is in src/ndevtop/.
"""

from src.ndevtop.app import main

if __name__ == "__main__":
    main()
