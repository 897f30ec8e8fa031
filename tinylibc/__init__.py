"""C-style helpers: conversions, strings, approximate math, formatted I/O, environment, a simulated heap and a gcc wrapper."""

__version__ = "0.1.0"