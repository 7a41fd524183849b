"""Domain layer - the pattern implementations, grouped by category."""
