from pydantic import BaseModel
from typing_extensions import Self


class Serializable(BaseModel):
    def to_json(self) -> str:
        return self.model_dump_json(indent=2)

    @classmethod
    def from_json(cls, data: str | bytes) -> Self:
        return cls.model_validate_json(data)
