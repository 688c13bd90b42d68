class LoadError(OSError):
    """A dictionary could not be read (missing, unreadable, or not downloaded)."""
