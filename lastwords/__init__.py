"""
Last Words Backend

Diagnostics and authentication surface for the Last Words service.

Package Structure:
==================
    lastwords/
    ├── api/        ← FastAPI application (routes, guards, middleware)
    ├── shared/     ← Shared code (schemas, services, db, crypto)
    └── config/     ← Configuration

Running the Application:
========================
    uvicorn lastwords.api.main:app --reload
"""
