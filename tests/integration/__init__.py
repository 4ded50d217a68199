"""
Integration Tests - End-to-End Pipeline Tests.

These tests verify that validation, strategies, the failure boundary and
the adapters work together. The analysis delay is disabled or mocked.

Test Files:
    - test_valuation_pipeline.py: Full estimation workflow
"""
