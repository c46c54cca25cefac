
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBasic, HTTPBasicCredentials, HTTPBearer
from sqlalchemy.orm import Session
from jose import JWTError
from recipebook.auth.service import Principal, authenticate, load_principal_by_id
from recipebook.db.session import SessionLocal
from recipebook.exceptions import Forbidden, PrincipalNotFound, Unauthenticated
from recipebook.repositories.recipe_repository import RecipeRepository
from recipebook.repositories.user_repository import UserRepository
from recipebook.services.ownership import OwnershipPolicy
from recipebook.services.recipes import RecipeService
from recipebook.services.users import UserService
from recipebook.utils.security import token_user_id

basic_scheme = HTTPBasic(auto_error=False)
bearer_scheme = HTTPBearer(auto_error=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

# per-request wiring: stores from the session, services from the stores

def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return UserRepository(db)

def get_recipe_repository(db: Session = Depends(get_db)) -> RecipeRepository:
    return RecipeRepository(db)

def get_user_service(users: UserRepository = Depends(get_user_repository)) -> UserService:
    return UserService(users)

def get_recipe_service(recipes: RecipeRepository = Depends(get_recipe_repository)) -> RecipeService:
    return RecipeService(recipes)

def get_ownership_policy(users: UserRepository = Depends(get_user_repository)) -> OwnershipPolicy:
    return OwnershipPolicy(users)

# guards

def public() -> None:
    return None

def _principal_from_bearer(db: Session, token: str) -> Principal:
    try:
        return load_principal_by_id(db, token_user_id(token))
    except (JWTError, PrincipalNotFound):
        raise Unauthenticated("Invalid token")

def requires_authentication(
    db: Session = Depends(get_db),
    bearer: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    basic: HTTPBasicCredentials | None = Depends(basic_scheme),
) -> Principal:
    if bearer is not None:
        return _principal_from_bearer(db, bearer.credentials)
    if basic is not None:
        return authenticate(db, basic.username, basic.password)
    raise Unauthenticated()

def requires_role(role: str):
    def guard(principal: Principal = Depends(requires_authentication)) -> Principal:
        if not principal.has_role(role):
            raise Forbidden()
        return principal
    return guard
