"""Infrastructure adapters: MongoDB persistence and event publishing."""
