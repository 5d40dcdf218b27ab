"""Base models using Pydantic."""

from pydantic import BaseModel


class ApiModel(BaseModel):
    """Base for API payloads. Unknown fields sent by the server are ignored."""

    model_config = {"extra": "ignore", "populate_by_name": True}

    def __str__(self) -> str:
        return self.model_dump_json(indent=2, exclude_none=True)
