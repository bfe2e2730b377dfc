"""Watch sub-folders and rename new images following a fixed order of names."""

__version__ = "1.0.0"

__all__ = ["__version__"]