"""floornav: floor maps and position checks for indoor navigation."""

__version__ = "0.1.0"
