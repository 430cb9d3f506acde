from pydantic import BaseModel, Field
from starlette import status


class ActionResult[DataT](BaseModel):
    success: bool = True
    data: DataT | None = None
    error: str | None = None
    status_code: int = Field(default=status.HTTP_200_OK, exclude=True)
