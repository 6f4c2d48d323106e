# storefront/services/auth_service.py
import uuid

from storefront.data.models import UserModel
from storefront.data.store import JsonStore
from storefront.domain.errors import ConflictError, UnauthorizedError, ValidationError
from storefront.domain.schemas import AuthOut, Identity, UserPublic
from storefront.repos.user_repo import UserRepo, find_by_email
from storefront.utils.logging import get_logger
from storefront.utils.security import create_token, decode_token, hash_password, verify_password

logger = get_logger(__name__)


def _auth_response(user: UserModel) -> AuthOut:
    token = create_token(user.id, user.email, user.name)
    return AuthOut(token=token, user=UserPublic.model_validate(user))


class AuthService:
    """
    signup / login -> podpisany token + publiczne pola usera
    verify -> tozsamosc z tokena (guard dla tras modyfikujacych)
    """

    def __init__(self, store: JsonStore):
        self.repo = UserRepo(store)

    def signup(self, name: str | None, email: str | None, password: str | None) -> AuthOut:
        if not name or not email or not password:
            raise ValidationError("name, email, password required")

        # hash poza lockiem, bcrypt jest wolny
        password_hash = hash_password(password)

        with self.repo.session() as users:
            if find_by_email(users, email):
                logger.warning("Signup rejected, email already registered")
                raise ConflictError("Email already registered")

            user = UserModel(
                id=str(uuid.uuid4()),
                name=name,
                email=email,
                password_hash=password_hash,
                cart=[],
            )
            users.append(user)

        logger.info(f"Created user {user.id}")
        return _auth_response(user)

    def login(self, email: str | None, password: str | None) -> AuthOut:
        if not email or not password:
            raise ValidationError("email, password required")

        user = self.repo.get_by_email(email)
        if not user or not verify_password(password, user.password_hash):
            logger.warning("Login failed: invalid credentials")
            raise UnauthorizedError("Invalid credentials")

        logger.info(f"User {user.id} logged in")
        return _auth_response(user)

    @staticmethod
    def verify(token: str | None) -> Identity:
        if not token:
            raise UnauthorizedError("Missing token")

        payload = decode_token(token)
        try:
            return Identity(id=payload["id"], email=payload["email"], name=payload["name"])
        except (KeyError, TypeError, ValueError) as e:
            raise UnauthorizedError("Invalid token") from e
