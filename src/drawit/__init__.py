"""
DrawIt - wire contract and REST client for the DrawIt drawing game

Packages:
- schema: request/response records and the ApiResponse envelope
- sdk: async client for the backend REST endpoints
"""

__version__ = "0.1.0"
