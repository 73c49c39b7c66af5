# sha2digest Test Suite
"""
Test suite including:
- Unit tests (compressor, digest engine)
- Known-answer vectors
- Invalid input and lifecycle tests
- CLI tests

Run with: pytest
Skip multi-megabyte inputs: pytest -m "not slow"
"""
