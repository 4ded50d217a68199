"""
Test Suite for Site Valuator.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end pipeline tests
    - fixtures/: Shared test helpers

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest --cov=src/site_valuator          # With coverage
"""
