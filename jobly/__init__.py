"""
Jobly Backend Package.

FastAPI service for a job board: companies and the jobs they post, with
CRUD endpoints, filtered search, and bearer-token gating of writes.

Subpackages:
    - api: FastAPI route handlers
    - core: Configuration, database pool, errors, auth dependencies
    - models: Pydantic request/response schemas
    - services: Entity access layer for companies and jobs
    - sql: Partial update compiler, filter composition, query templates
"""

__version__ = "1.0.0"
