"""Computational backends for correlation analysis."""
