"""
The date functions: parsing, leap years, time spans, clock angles.
"""
