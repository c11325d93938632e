from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr, field_validator


class Field(BaseModel):
    """A named, 1-indexed inclusive character range within every line."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: StrictStr
    start: StrictInt
    end: StrictInt

    @field_validator("name")
    @classmethod
    def _name_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("name must not be empty")
        return value

    @property
    def width(self) -> int:
        return self.end - self.start + 1

    def contains(self, position: int) -> bool:
        return self.start <= position <= self.end
