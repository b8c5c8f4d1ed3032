"""
Integration Tests - End-to-End Client Tests.

These tests drive the public Client through the real
RapidApiStockProvider, with httpx.MockTransport standing in for the
network.

Test Files:
    - test_client.py: price, prices and price_all workflows
"""
