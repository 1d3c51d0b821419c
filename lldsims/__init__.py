"""Small object-oriented simulations: an elevator bank, a parking lot and snakes and ladders."""

__version__ = "0.1.0"