"""Runtime configuration for the vector library."""
