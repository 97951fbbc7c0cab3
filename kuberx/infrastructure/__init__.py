"""Infrastructure layer: concrete adapters for domain interfaces."""
