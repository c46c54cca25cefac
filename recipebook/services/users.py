import structlog
from sqlalchemy.exc import IntegrityError

from recipebook.exceptions import DuplicateEmail
from recipebook.mappers import to_user
from recipebook.models.user import User
from recipebook.repositories.user_repository import UserRepository
from recipebook.schemas.auth import RegisterIn
from recipebook.utils.security import hash_password

logger = structlog.get_logger(__name__)


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


class UserService:
    def __init__(self, users: UserRepository):
        self.users = users

    def is_email_in_use(self, email: str) -> bool:
        return self.users.get_by_email(normalize_email(email)) is not None

    def get_user(self, user_id: int) -> User | None:
        return self.users.get(user_id)

    def register(self, email: str, raw_password: str) -> None:
        email = normalize_email(email)
        if self.users.get_by_email(email) is not None:
            raise DuplicateEmail()
        user = to_user(RegisterIn(email=email, password=raw_password), hash_password(raw_password))
        try:
            self.users.add(user)
        except IntegrityError:
            # lost a race with a concurrent registration of the same email
            self.users.rollback()
            raise DuplicateEmail()
        logger.info("user_registered", user_id=user.id)
