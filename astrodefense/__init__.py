"""AstroDefense: asteroid impact physics and deflection mission simulator."""

__version__ = "0.1.0"
