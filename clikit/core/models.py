"""
Pydantic models for command inputs.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator


class TestCommandInput(BaseModel):
    """Validated options of the ``test`` command."""
    name: str = Field(..., min_length=1, description="Your name.")
    age: int = Field(..., ge=0, le=150, description="Your age in years.")
    args: list[str] = Field(default_factory=list, description="Any extra arguments passed to the command.")

    model_config = ConfigDict(str_strip_whitespace=True)

    __test__ = False  # not a pytest test class

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject names made only of punctuation or digits."""
        if not any(ch.isalpha() for ch in v):
            raise ValueError("Name must contain at least one letter")
        return v
