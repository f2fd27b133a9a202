from typing import Optional

from pydantic import BaseModel


class Manager(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None
    department: Optional[str] = None
