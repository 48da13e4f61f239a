"""National Weather Service forecast client."""

__version__ = "0.1.0"
