"""Pursuit Filters — criteria filtering and share-link engine for procurement pursuits.

Invariants:
    - Package root holds metadata only (no import side effects)
"""

__version__ = "1.0.0"
