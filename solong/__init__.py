"""A tile-based puzzle game: collect every item, then reach the exit.

Includes map loading and validation, the game rules, a pygame window,
and an XPM image reader for the tile textures.
"""

__version__ = "1.0.0"