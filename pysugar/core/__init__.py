"""Core components for pysugar.

This package contains the pieces the helper modules build on: the
exception hierarchy, the error-handling combinators, the validator base
class with its chain runner, and the configuration manager.
"""
