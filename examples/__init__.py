# examples/__init__.py
"""
objectlessons examples package.

This package contains demonstration scripts showing how to use the lessons.
These are examples for learning, not tests for verification.

Available examples:
- basic_example.py: Run lessons directly and through the runner
- copy_semantics.py: Check aliasing vs. copying on your own objects
"""
