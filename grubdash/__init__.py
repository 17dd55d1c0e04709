"""
                GrubDash API

In-memory CRUD service for restaurant dishes and delivery orders,
with request validation expressed as ordered pipelines.
"""

__version__ = "1.0.0"
