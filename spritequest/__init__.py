"""A small sprite-based role-playing game: sprites, movement, animation, buttons and game screens."""

__version__ = "0.1.0"