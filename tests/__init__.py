"""
Checknote Test Suite
====================

Run tests with:
    pytest tests/
"""
