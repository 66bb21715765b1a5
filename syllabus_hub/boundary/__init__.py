"""
Boundary layer for external system integrations.

Handles all interactions with external systems (database, PDF storage).
Provides adapters and clients for infrastructure dependencies.
"""
