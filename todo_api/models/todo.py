"""ToDo entity model using Pydantic."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ToDo(BaseModel):
    """A task to be completed.

    ``id`` is empty until the storage layer assigns one and ``mod_time`` is
    refreshed by the storage layer on every write. Clients never set either
    field meaningfully.
    """

    id: str = ""
    title: str = ""
    completed: bool = False
    mod_time: Optional[datetime] = Field(None, alias="modTime")

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    @classmethod
    def parse(cls, body: Optional[str]) -> "ToDo":
        """Parse a JSON request body; raises ``ValidationError`` on bad input.

        A JSON ``null`` document yields an empty ToDo.
        """
        if body is not None and body.strip() == "null":
            return cls()
        return cls.model_validate_json(body if body is not None else "")

    def to_wire(self) -> dict:
        """Return the JSON-compatible representation using wire field names."""
        return self.model_dump(mode="json", by_alias=True)
