"""Core logic of a web-based serial terminal: INI parsing, config values, encodings and status replies."""

__version__ = "0.1.0"