"""Computational backends for normality tests."""
