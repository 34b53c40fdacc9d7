from pydantic import BaseModel, Field

# ---------- Inputs ----------

class AdminLoginIn(BaseModel):
    username: str = Field(min_length=1, examples=["admin"])
    password: str = Field(min_length=1)

class RegisterIn(BaseModel):
    nom: str = Field(min_length=1, max_length=100, examples=["Sara"])
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$", examples=["sara@example.com"])
    password: str = Field(min_length=1, max_length=128)

class UserLoginIn(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


# ---------- Outputs ----------

class AdminIdentityOut(BaseModel):
    id: int
    username: str

    model_config = {"from_attributes": True}

class AdminLoginOut(BaseModel):
    token: str
    admin: AdminIdentityOut

class UserIdentityOut(BaseModel):
    id: int
    nom: str
    email: str

    model_config = {"from_attributes": True}

class UserLoginOut(BaseModel):
    token: str
    user: UserIdentityOut

class RegisterOut(BaseModel):
    message: str
    id: int
