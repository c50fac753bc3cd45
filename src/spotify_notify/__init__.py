"""Spotify Notify - control MPRIS media players from the command line."""

__version__ = "0.1.0"
