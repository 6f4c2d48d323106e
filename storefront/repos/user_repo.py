# storefront/repos/user_repo.py
from contextlib import contextmanager
from typing import Iterator, List

from pydantic import ValidationError as SchemaError

from storefront.data.models import UserModel
from storefront.data.store import USERS, JsonStore
from storefront.domain.errors import StoreError


def _load(records: list) -> List[UserModel]:
    try:
        return [UserModel.model_validate(r) for r in records]
    except SchemaError as e:
        raise StoreError(f"Malformed user record: {e}") from e


class UserRepo:
    def __init__(self, store: JsonStore):
        self.store = store

    def list_users(self) -> List[UserModel]:
        return _load(self.store.read(USERS)[USERS])

    def get_user(self, user_id: str) -> UserModel | None:
        return next((u for u in self.list_users() if u.id == user_id), None)

    def get_by_email(self, email: str) -> UserModel | None:
        return find_by_email(self.list_users(), email)

    @contextmanager
    def session(self) -> Iterator[List[UserModel]]:
        """Read-modify-write calej kolekcji, zapis po wyjsciu z bloku bez bledu."""
        with self.store.transaction(USERS) as doc:
            users = _load(doc[USERS])
            yield users
            doc[USERS] = [u.model_dump(by_alias=True) for u in users]


def find_by_email(users: List[UserModel], email: str) -> UserModel | None:
    needle = email.lower()
    return next((u for u in users if u.email.lower() == needle), None)


def find_by_id(users: List[UserModel], user_id: str) -> UserModel | None:
    return next((u for u in users if u.id == user_id), None)
