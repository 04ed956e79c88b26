"""Console input gateway."""
