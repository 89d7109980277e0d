"""Core utilities shared across artinit modules."""
