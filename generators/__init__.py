"""Deterministic pseudo-random generators and the permutation engine."""
