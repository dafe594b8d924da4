"""
Test Package

Contains unit tests for all modules.
Run with: pytest tests/ -v

Test files should follow the pattern:
    test_<module_name>.py

Example:
    tests/test_notes.py       - Tests for fretscope/theory/notes.py
    tests/test_normalizer.py  - Tests for fretscope/tab/normalizer.py
"""
