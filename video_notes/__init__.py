"""Video Notes Dashboard backend."""
