"""Find nyaa.si releases of the next episode a viewer needs."""

__version__ = "1.0.0"
