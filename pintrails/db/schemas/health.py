from pydantic import BaseModel
from typing import Optional

class DatabaseStatusOut(BaseModel):
    state: str
    host: Optional[str] = None
    database: Optional[str] = None
    error: Optional[str] = None
