"""Utility modules for the pyvalq application.

This package contains the decoders that turn parsed JSON values into typed
values, and the loader that reads JSON documents from files or URLs.
"""
