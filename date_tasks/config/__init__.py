"""
Configuration loading and validation.

Provides a strongly typed settings object for the local timezone and log
level, loaded from environment variables with upfront validation.
"""
