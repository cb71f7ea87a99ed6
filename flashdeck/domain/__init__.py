"""Domain layer: entities and value objects, free of storage and transport concerns."""
