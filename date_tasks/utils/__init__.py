"""
Generic utility functions shared across modules.

Includes instant coercion (date-like values to UTC Timestamps) and logging
setup.
"""
