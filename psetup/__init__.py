"""psetup -- scaffold a new project directory tree from command-line options."""

__version__ = "0.3.0"
