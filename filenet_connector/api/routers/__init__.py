"""
API routers for the FileNet connector.
"""
