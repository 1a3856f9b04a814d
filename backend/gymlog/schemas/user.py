from typing import Annotated
from pydantic import BaseModel, Field, StringConstraints

UsernameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]

class UserLogin(BaseModel):
    username: UsernameStr
    password: Annotated[str, Field(min_length=1, max_length=256)]

class TokenRead(BaseModel):
    access_token: str
    token_type: str = "bearer"
