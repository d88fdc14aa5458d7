"""solidex: the five SOLID principles as small runnable examples."""

__version__ = "0.1.0"
