"""articlegroups

An in-memory registry of help-desk article groups. Staff organize help
articles into named, described groups and query them by name or by the
articles they hold.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
