"""
API Module

FastAPI application and route handlers.

Package Structure:
==================
    api/
    ├── main.py           ← Application entry point
    ├── routes.py         ← Route registration
    ├── dependencies/     ← Guards, route markers and injected services
    ├── handlers/         ← Route handlers
    └── middleware/       ← Error handling and request context

Usage:
======
    # Run the API
    uvicorn lastwords.api.main:app --reload

    # Import the app
    from lastwords.api.main import app, create_application
"""
