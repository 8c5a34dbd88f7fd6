# journal models — the stored entry as the insight engine sees it
# storage owns these; the engine only reads them

from datetime import datetime
from pydantic import BaseModel, Field


class JournalEntry(BaseModel):
    """a journal entry from the journals collection"""
    id: str
    author_id: str = Field(..., alias="authorId")
    text: str = ""
    created_at: datetime = Field(..., alias="createdAt")

    model_config = {"populate_by_name": True, "frozen": True}
