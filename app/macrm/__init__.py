"""macrm - Remove macOS applications together with their leftover files."""

__version__ = "0.1.0"
