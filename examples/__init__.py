"""Example scripts for yextapi.

This package demonstrates library usage but is not part of the core API.
"""
