"""Domain layer: the player entity and identifier strategies."""
