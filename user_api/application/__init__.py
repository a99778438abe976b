"""Application layer: DTOs and use cases for the users resource."""
