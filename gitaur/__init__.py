"""gitaur: search, clone and build AUR packages from the AUR git mirror."""

__version__ = "0.1.0"
