"""HTTP surface for comparing partial temporal values."""
