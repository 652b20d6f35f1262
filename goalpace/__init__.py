"""goalpace - deadline-driven daily plans and weekly goal progress."""

__version__ = "0.1.0"
