"""A small pygame rhythm game with beats, a judge ring, a posing boss, hitbox shapes and a GIF decoder."""

__version__ = "0.1.0"