from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from smartparenting.auth.dependencies import get_admin_roster, get_token_issuer
from smartparenting.auth.router import router as auth_router
from smartparenting.core.exception_handlers import register_exception_handlers
from smartparenting.core.logging import add_request_logging, configure_logging
from smartparenting.core.settings import get_settings
from smartparenting.db.engine import init_db
from smartparenting.health.router import router as health_router
from smartparenting.user.router import router as user_router

configure_logging()


@asynccontextmanager
async def lifespan(_: FastAPI):
    init_db()
    # Build the roster and signer up front so configuration errors stop startup.
    get_admin_roster()
    get_token_issuer()
    yield


app = FastAPI(title="Smart Parenting Identity", version="0.1.0", lifespan=lifespan)

app.include_router(health_router)
app.include_router(auth_router)
app.include_router(user_router)

add_request_logging(app)
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)
