"""Domain layer: wire entities and query options."""
