"""Output layer — rendering command results for humans and machines."""
