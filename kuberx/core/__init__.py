"""Core application infrastructure: configuration, logging and metrics."""
