"""Settings, window layout and program-file discovery for a desktop launcher."""

__version__ = "0.1.0"