# tasklist/core/__init__.py
"""
Core module - settings, logging and exceptions shared by every layer.
"""
