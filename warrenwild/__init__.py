"""Grid-world simulation of rabbits, foxes and spreading grass, with a pygame window and population charts."""

__version__ = "0.1.0"