"""
docdirectory - searchable doctor directory.

Keyword search and faceted filtering over an in-memory collection of
doctor profiles, served over a FastAPI API and a click CLI.
"""

__version__ = "1.0.0"
