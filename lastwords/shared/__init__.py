"""
Shared Module

Code used by the API layer:
- Schemas: Pydantic request/response models
- Services: Environment inspection and diagnostics
- DB: Async session management and the probe query
- Core: Logging, exceptions
- Utils: JWT, bcrypt, email HMAC, argon2

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database session management
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    └── utils/          ← Security and hashing helpers

Usage:
======
    from lastwords.shared.services import EnvironmentService
    from lastwords.shared.schemas import AuthenticatedUser
    from lastwords.shared.core import logger, LastWordsException
"""
