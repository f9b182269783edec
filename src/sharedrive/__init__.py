"""sharedrive - folder and file sharing with inherited permissions."""

__version__ = "0.1.0"
