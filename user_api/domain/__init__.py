"""Domain layer: user entity, query filter, ports and error taxonomy."""
