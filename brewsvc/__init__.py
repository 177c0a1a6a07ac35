"""brewsvc - service status reporting for Homebrew-style formulae."""

__version__ = "0.1.0"
