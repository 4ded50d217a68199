"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation with injected random sources and
mocked collaborators. Unit tests should be fast, deterministic, and focused.
"""
