"""Commit Tally — per-author commit counts across every Git repository under a directory.

Walks a directory tree for repositories, counts commits by author in
parallel, and lists each repository's ``origin`` remote.
"""

__version__ = "0.1.0"
