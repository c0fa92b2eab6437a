"""
Temporal wrappers for the document operations.

- ``activities``: activity registrations, imported by workers only
- ``proxies``: workflow proxies, safe to import from workflow code
"""
