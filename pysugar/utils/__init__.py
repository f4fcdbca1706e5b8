"""Helper modules for pysugar.

This package contains the thin wrappers the library is made of: typed
environment access, terminal input, random values, file I/O and the HTTP
client.
"""
