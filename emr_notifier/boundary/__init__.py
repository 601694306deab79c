"""
Boundary layer: adapters for PostgreSQL and AWS services.
"""
