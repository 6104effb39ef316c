"""Building blocks for small 2D games: vectors, queued mesh and text drawing, timers, tweens, a seeded RNG and a spatial hash."""

__version__ = "0.1.0"