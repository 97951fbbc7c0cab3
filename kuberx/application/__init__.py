"""Application layer: use-case services and data transfer objects."""
