"""
Per-user task list with manual ordering and automatic expiry.
"""
__version__ = "1.0.0"
