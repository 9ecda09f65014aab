"""Score history and aggregate statistics."""
