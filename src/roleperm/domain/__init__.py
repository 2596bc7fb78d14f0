"""Domain layer - entities, value objects and pure permission logic."""
