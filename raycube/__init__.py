"""Scene parsing, XPM textures, pixel buffers and player movement for a grid raycaster."""

__version__ = "0.1.0"
__all__ = ["colornames", "config", "image", "player", "xpm"]