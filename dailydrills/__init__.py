"""Small exercises on parsing, errors, tagged data, state machines, file statistics and a device gateway."""

__version__ = "0.1.0"