"""
Performance Tests.

Benchmarks for Fundamental Screener performance requirements:
    - 1000 candidates < 5 seconds
    - Latency-bound runs scale with the worker ceiling
"""
