"""
HTTP API for single-query resolution.
"""
