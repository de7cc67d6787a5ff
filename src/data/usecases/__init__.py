"""Use cases backed by persistence ports."""
