"""Domain layer: entities, value objects, repository contracts and services."""
