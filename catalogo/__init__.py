"""Terminal film catalogue kept in a semicolon-separated text file."""

__version__ = "0.1.0"