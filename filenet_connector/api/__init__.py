"""
HTTP API for the FileNet connector.
"""
