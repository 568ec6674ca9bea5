from typing import Optional, Union
from pydantic import BaseModel


class CallerContext(BaseModel):
    """Identity and role of whoever is making the current request"""

    user_id: Union[int, str]
    name: Optional[str] = None
    email: Optional[str] = None
    role: str


class LogoutOut(BaseModel):
    success: bool = True
