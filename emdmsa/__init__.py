"""Progressive multiple sequence alignment scored by earth mover's distance."""

__version__ = "0.1.0"