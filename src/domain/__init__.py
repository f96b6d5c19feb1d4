"""Domain layer: contest state, submissions and ranking views."""
