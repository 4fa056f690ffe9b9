"""
Shared helpers: logging, JSON I/O and layout previews.
"""
