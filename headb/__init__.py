"""headb: account → collection → document store with ownership checks."""

__version__ = "0.1.0"
