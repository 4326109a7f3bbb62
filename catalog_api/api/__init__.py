"""
==============================================================================
API Package
==============================================================================

HTTP routers for the catalog service.

==============================================================================
"""
