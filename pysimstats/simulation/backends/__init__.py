"""Random sampling backends for data generation."""
