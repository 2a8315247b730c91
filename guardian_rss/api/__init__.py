"""HTTP layer for the Guardian RSS gateway."""
