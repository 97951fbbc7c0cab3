"""Domain layer: entities, exceptions and interfaces."""
