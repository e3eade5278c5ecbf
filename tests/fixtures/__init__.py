"""
Test Fixtures and Utilities

Synthetic budget snapshots and line item helpers shared across tests.
All test data is synthetic and does not contain real financial information.
"""
