"""
Test Suite for Latest Stock Price.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Client tests over a fake HTTP transport
    - fixtures/: Shared test fixtures and sample data

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest --cov=src/latest_stock_price    # With coverage
"""
