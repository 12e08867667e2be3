"""Ten-pin bowling scoring engine with a thin HTTP and command-line surface."""

__version__ = "0.1.0"
