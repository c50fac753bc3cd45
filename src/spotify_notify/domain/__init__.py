"""Domain layer - library models and playback logic."""
