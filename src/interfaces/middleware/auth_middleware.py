from __future__ import annotations

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from src.application.errors import AuthError, ValidationError
from src.config.settings import Settings
from src.infrastructure.auth.context import AuthContext


class AuthMiddleware(BaseHTTPMiddleware):
    """Resolve the bearer token, when present, into the caller identity.

    Requests without an Authorization header pass through anonymously; endpoints
    that mutate the ledger demand a caller through ``get_auth_context``.
    """

    def __init__(self, app, *, settings: Settings) -> None:
        super().__init__(app)
        self.settings = settings

    async def dispatch(self, request: Request, call_next) -> Response:
        request.state.auth_context = None
        # Let CORS preflight pass without auth checks
        if request.method == "OPTIONS":
            return await call_next(request)
        authorization = request.headers.get("Authorization")
        if not authorization:
            return await call_next(request)

        try:
            scheme, _, token = authorization.partition(" ")
            if scheme.lower() != "bearer" or not token:
                raise AuthError("Invalid Authorization header")
            jwt_service = getattr(request.app.state, "jwt_service", None)
            if jwt_service is None:
                raise RuntimeError("JWT service not configured")
            claims = jwt_service.decode(token)

            subject = claims.get("sub")
            if not subject:
                raise AuthError("Token missing subject")
            resolver = request.app.state.identity_resolver
            try:
                identity = resolver.canonicalize(str(subject))
            except ValidationError as exc:
                raise AuthError("Token subject is not a valid address") from exc
            request.state.auth_context = AuthContext(
                identity=identity,
                display=resolver.display(identity),
                claims=claims,
            )
            return await call_next(request)
        except AuthError as exc:
            payload = {"code": exc.code, "message": exc.message}
            if exc.details is not None:
                payload["details"] = exc.details
            return JSONResponse(status_code=exc.status_code, content=payload)
