"""
Directory Exploder - A CLI tool to move the contents of a directory up into
another directory and remove the emptied source.

Features:
- Atomic rename per entry, with copy-then-delete across filesystems
- Overwrite (force) and dry-run modes
- Optional progress visualization
- Cross-device copies verified using xxhash
"""

__version__ = "1.0.0"
