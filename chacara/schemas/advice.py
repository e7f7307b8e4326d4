from pydantic import BaseModel, Field, field_validator


class AdviceQuery(BaseModel):
    query: str = Field(min_length=1, max_length=4000)

    @field_validator("query", mode="before")
    @classmethod
    def _strip_query(cls, v):
        return v.strip() if isinstance(v, str) else v


class AdviceAnswer(BaseModel):
    answer: str
