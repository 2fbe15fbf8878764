"""Domain services. Each takes a Session and raises core.errors on failure."""
