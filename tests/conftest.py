"""
tests/conftest.py
Global pytest configuration and fixtures.
"""

import matplotlib

# Graphs are only ever rendered to bytes, never shown
matplotlib.use("Agg")
