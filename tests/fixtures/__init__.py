"""
Test Fixtures - Shared Test Helpers.

This package contains reusable test helpers:
    - random_sources.FixedRandom: Deterministic stand-in for random.Random

Usage:
    from tests.fixtures.random_sources import FixedRandom
"""
