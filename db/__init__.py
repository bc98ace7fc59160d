"""
Schema migrations and reference-data seeders for the runclub backend.

Runtime DB access lives in the services. This package is for repo-level DB operations:
- Alembic migrations config
- Reversible reference-data seeders and their runner
"""
