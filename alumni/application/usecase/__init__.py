"""Use cases orchestrating domain services."""
