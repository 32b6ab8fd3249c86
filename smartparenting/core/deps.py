"""Shared dependency type aliases for FastAPI routes.

Domain-specific dependencies (services, roster, current token) live in
``smartparenting.auth.dependencies``.
"""

from typing import Annotated

from fastapi import Depends
from sqlmodel import Session

from smartparenting.db.engine import get_session

# Database session
SessionDep = Annotated[Session, Depends(get_session)]
