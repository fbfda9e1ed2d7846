"""
API layer for the DineDash catalog backend.

Exposes the vendor, firm and product HTTP endpoints.
"""
