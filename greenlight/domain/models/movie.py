from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class Movie(BaseModel):
    title: str = ""
    year: int = 0
    runtime: int = 0
    genres: Optional[List[str]] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    version: int = 0
