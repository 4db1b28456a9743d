"""Service layer: the player store and the result-returning roster service."""
