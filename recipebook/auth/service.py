
from dataclasses import dataclass
from sqlalchemy.orm import Session
from recipebook.exceptions import PrincipalNotFound, Unauthenticated
from recipebook.models.user import User
from recipebook.repositories.user_repository import UserRepository
from recipebook.services.users import normalize_email
from recipebook.utils.security import verify_password, create_access_token

@dataclass(frozen=True)
class Principal:
    """Authenticated caller. Carries identity and role, never the User row."""
    id: int
    username: str
    password_hash: str
    authorities: tuple[str, ...]

    def has_role(self, role: str) -> bool:
        return role in self.authorities

def principal_from_user(user: User) -> Principal:
    return Principal(
        id=user.id,
        username=user.email,
        password_hash=user.password,
        authorities=(user.role,),
    )

def load_principal(db: Session, email: str) -> Principal:
    user = UserRepository(db).get_by_email(normalize_email(email))
    if user is None:
        raise PrincipalNotFound()
    return principal_from_user(user)

def load_principal_by_id(db: Session, user_id: int) -> Principal:
    user = UserRepository(db).get(user_id)
    if user is None:
        raise PrincipalNotFound()
    return principal_from_user(user)

def authenticate(db: Session, email: str, password: str) -> Principal:
    try:
        principal = load_principal(db, email)
    except PrincipalNotFound:
        raise Unauthenticated("Invalid credentials")
    if not verify_password(password, principal.password_hash):
        raise Unauthenticated("Invalid credentials")
    return principal

def login_user(db: Session, email: str, password: str) -> str:
    principal = authenticate(db, email, password)
    return create_access_token(str(principal.id))
