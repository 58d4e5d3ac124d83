"""Player implementations."""
