"""
Sextant CLI - Command-line interface for distance expressions.

Usage:
    sextant evaluate jobs/park_proximity.yaml
    sextant serialize jobs/park_proximity.yaml
"""

__version__ = "1.0.0"
