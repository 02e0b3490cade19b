from __future__ import annotations

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, EmailStr, Field, field_validator
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.db.session import get_db
from app.core.logging import configure_logging
from app.core.middleware.context import get_logger, set_actor
from app.core.middleware.request_id import RequestIdMiddleware
from app.core.security.passwords import check_password_bytes
from app.modules.auth.routes import router as auth_router
from app.modules.auth.service import ensure_admin
from app.modules.companies.routes import router as companies_router
from app.modules.founders.routes import router as founders_router
from app.modules.fundraising.routes import router as fundraising_router
from app.modules.mentors.routes import router as mentors_router
from app.modules.revenue.routes import router as revenue_router
from app.shared.enums import Env, Role
from app.shared.exceptions import AppError

logger = get_logger()


class DevSeedRequest(BaseModel):
    email: EmailStr = "admin@portfolio-admin.com"
    password: str = Field(default="change-me-now", min_length=8, max_length=72)

    @field_validator("password")
    @classmethod
    def _password_fits_bcrypt(cls, value: str) -> str:
        return check_password_bytes(value)


def _error_body(message: str, errors: list[dict] | None = None) -> dict:
    body: dict = {"message": message}
    if errors:
        body["errors"] = errors
    return body


def _field_errors(exc: RequestValidationError) -> list[dict]:
    out: list[dict] = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        out.append({"field": ".".join(loc), "message": err.get("msg", "invalid value")})
    return out


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body("Invalid input", _field_errors(exc)),
        )

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(AppError)
    async def _app_error(request: Request, exc: AppError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message, exc.errors))

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled_exception", path=request.url.path, method=request.method)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body("Internal server error"),
        )


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(title="VC Portfolio Backend", version="0.1.0")
    app.add_middleware(RequestIdMiddleware)
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )
    register_exception_handlers(app)

    @app.get("/health", tags=["admin"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/api/health", tags=["admin"])
    def health_api() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/admin/dev/seed", tags=["admin"])
    def dev_seed(payload: DevSeedRequest | None = None, db: Session = Depends(get_db)) -> dict:
        if settings.env != Env.dev:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

        payload = payload or DevSeedRequest()
        set_actor("dev-seed", Role.ADMIN.value)
        user, created = ensure_admin(db, email=payload.email, password=payload.password)
        logger.info("dev.seed", user_id=str(user.id), created=created)
        return {"user_id": str(user.id), "email": user.email, "role": Role.ADMIN.value, "created": created}

    api = APIRouter(prefix="/api")
    api.include_router(auth_router)
    api.include_router(companies_router)
    api.include_router(founders_router)
    api.include_router(fundraising_router)
    api.include_router(revenue_router)
    api.include_router(mentors_router)
    app.include_router(api)

    return app


app = create_app()
