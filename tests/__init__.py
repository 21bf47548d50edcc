# Place Gallery Test Suite
"""
Test suite for the place gallery service.

Unit tests cover the gallery value types and services in isolation;
integration tests go through the HTTP API against a temporary database.
"""
