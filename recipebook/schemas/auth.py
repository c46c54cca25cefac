
from pydantic import BaseModel

class RegisterIn(BaseModel):
    email: str = ""
    password: str = ""

class LoginIn(BaseModel):
    email: str
    password: str

class TokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"
