"""Number filtering pipeline and a switchable-sink logger."""

__version__ = "0.1.0"
