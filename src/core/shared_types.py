"""
Type definitions used across layers
"""

from enum import StrEnum

# --- NOTE The domain layer has its own Color enum (src/chess/pieces.py).
# --- This string version is what gets sent across the boundary.


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"
