"""EFA departure monitor for the command line."""

__version__ = "1.2.0"
