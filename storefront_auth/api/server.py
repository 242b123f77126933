from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from storefront_auth import __version__
from storefront_auth.auth import add_wishlist_item, get_current_claims, login_user, register_user
from storefront_auth.config import Config, load_config, validate_config
from storefront_auth.db import init_db
from storefront_auth.errors import AuthError


def _debug(msg: str) -> None:
    print(f"[api] {msg}")


# Fields are optional so a missing value reaches the handler and gets the
# API's own 400 message instead of a schema error.
class RegisterRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class WishlistRequest(BaseModel):
    # Stored as given; the datastore rejects what it cannot bind.
    product_id: Any = None


def _cfg(request: Request) -> Config:
    return request.app.state.cfg


async def _auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def _body_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed JSON or wrong-typed fields; report like any other bad input.
    return JSONResponse(status_code=400, content={"message": "Invalid request body."})


def create_app(cfg: Config | None = None) -> FastAPI:
    """Build the API.

    Raises ConfigError when required settings are missing, so callers never
    get an app that cannot sign tokens.
    """
    cfg = validate_config(cfg if cfg is not None else load_config())

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        init_db(cfg.DB_DSN)
        _debug(f"Ready (token ttl={cfg.JWT_EXPIRES_SECONDS}s)")
        yield

    app = FastAPI(title="Storefront Auth", version=__version__, lifespan=lifespan)
    # Make config available to auth deps.
    app.state.cfg = cfg

    _cors_origins = [o.strip() for o in (cfg.CORS_ALLOW_ORIGINS or "").split(",") if o.strip()]
    if _cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=_cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_exception_handler(AuthError, _auth_error_handler)
    app.add_exception_handler(RequestValidationError, _body_error_handler)

    # -----------------------------
    # Health
    # -----------------------------

    @app.get("/health")
    def health() -> Dict[str, Any]:
        return {"status": "ok"}

    # -----------------------------
    # Auth
    # -----------------------------

    @app.post("/register", status_code=201)
    def register(payload: RegisterRequest, request: Request) -> Dict[str, Any]:
        user_id = register_user(
            _cfg(request),
            name=payload.name,
            email=payload.email,
            password=payload.password,
        )
        return {"message": "User registered successfully", "userId": user_id}

    @app.post("/login")
    def login(payload: LoginRequest, request: Request) -> Dict[str, Any]:
        session = login_user(_cfg(request), email=payload.email, password=payload.password)
        return {"message": "Login successful", "token": session["token"], "user": session["user"]}

    # -----------------------------
    # Wishlist
    # -----------------------------

    @app.post("/wishlist", status_code=201)
    def wishlist_add(
        payload: WishlistRequest,
        request: Request,
        claims: Dict[str, Any] = Depends(get_current_claims),
    ) -> Dict[str, Any]:
        add_wishlist_item(_cfg(request), user_id=claims["userId"], product_id=payload.product_id)
        return {"message": "Item added to wishlist!"}

    return app
