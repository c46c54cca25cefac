
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from recipebook.auth.deps import get_db, get_user_service, public
from recipebook.auth.service import login_user
from recipebook.schemas.auth import RegisterIn, LoginIn, TokenOut
from recipebook.services.users import UserService
from recipebook.validation import ensure_valid, validate_registration

router = APIRouter(prefix="/api", tags=["auth"], dependencies=[Depends(public)])

@router.post("/register")
@router.post("/register/", include_in_schema=False)
def register(body: RegisterIn, users: UserService = Depends(get_user_service)):
    ensure_valid(validate_registration(body))
    users.register(body.email, body.password)
    return Response(status_code=200)

@router.post("/login", response_model=TokenOut)
@router.post("/login/", response_model=TokenOut, include_in_schema=False)
def login(body: LoginIn, db: Session = Depends(get_db)):
    return TokenOut(access_token=login_user(db, body.email, body.password))
