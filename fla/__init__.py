"""Domain layer for the French learning blog."""
