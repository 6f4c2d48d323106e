# storefront/api/deps.py
from fastapi import Header, Request

from storefront.data.store import JsonStore
from storefront.domain.schemas import Identity
from storefront.services.auth_service import AuthService


def get_store(request: Request) -> JsonStore:
    #jeden store na aplikacje, tworzony w create_app
    return request.app.state.store


def bearer_token(authorization: str | None) -> str | None:
    if not authorization or not authorization.startswith("Bearer "):
        return None
    return authorization[len("Bearer "):].strip() or None


def require_user(authorization: str | None = Header(default=None)) -> Identity:
    """Guard dla tras modyfikujacych: 401 zanim handler dotknie store."""
    return AuthService.verify(bearer_token(authorization))
