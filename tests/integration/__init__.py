"""
Integration Tests - End-to-End Screening Tests.

These tests verify that the screener, collaborators and result assembly
work together. They use in-memory fakes and the mock adapters to avoid
external dependencies.
"""
