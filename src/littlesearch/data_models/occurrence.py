from pydantic import BaseModel, ConfigDict, Field


class Occurrence(BaseModel):
    """How many times one keyword appears in one document."""

    model_config = ConfigDict(frozen=True)

    doc_id: str
    frequency: int = Field(ge=1)

    def __str__(self) -> str:
        return f"({self.doc_id},{self.frequency})"
