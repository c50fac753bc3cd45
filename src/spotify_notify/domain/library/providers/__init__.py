"""Remote track providers."""
