from typing import Optional

from pydantic import BaseModel, ConfigDict


class Movie(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    title: Optional[str] = None
    director: Optional[str] = None
    year_released: int = 0
    genre: Optional[str] = None
    duration: int = 0
    rating: float = 0.0
    id: Optional[str] = None
