# storefront/utils/security.py
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import bcrypt
import jwt

from storefront.domain.errors import UnauthorizedError
from storefront.utils import settings

BCRYPT_MAX_BYTES = 72


def _secret(password: str) -> bytes:
    # bcrypt uzywa tylko 72 bajtow, nowsze wersje rzucaja ValueError dla dluzszych
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    #gensalt -> losowa sol per uzytkownik, zapisana w samym hashu
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_secret(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(_secret(password), password_hash.encode("utf-8"))
    except ValueError:
        # zly format hasha w pliku = nie pasuje
        return False


def create_token(user_id: str, email: str, name: str) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "id": user_id,
        "email": email,
        "name": name,
        "iat": now,
        "exp": now + timedelta(seconds=settings.TOKEN_TTL_SECONDS),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> Dict[str, Any]:
    """
    Weryfikuje podpis i exp, zwraca payload
    NIE sprawdza czy user nadal istnieje, token wazny do wygasniecia
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["exp", "id"]},
        )
    except jwt.InvalidTokenError as e:
        raise UnauthorizedError("Invalid token") from e
    return payload
