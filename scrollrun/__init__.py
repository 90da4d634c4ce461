"""A two-player side-scrolling game with split-screen cameras and a best-scores table."""

__version__ = "0.1.0"