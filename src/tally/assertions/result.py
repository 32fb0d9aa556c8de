"""Assertion result model."""

from uuid import UUID, uuid4

from pydantic import BaseModel, Field, SerializationInfo, field_serializer


class AssertionResult(BaseModel):
    """Outcome of a single checked condition.

    Attributes:
    ----------
    assertion_id: UUID
        Unique identifier for this check
    condition_text: str
        Label of the checked expression, usually its source text
    passed: bool
        Whether the condition held
    test_description: str | None
        Description of the enclosing test block, if any
    """

    assertion_id: UUID = Field(default_factory=uuid4)
    condition_text: str
    passed: bool
    test_description: str | None = None

    @field_serializer("condition_text")
    def _truncate(self, v: str, info: SerializationInfo) -> str:
        """Truncate the condition text to 50 characters when requested."""
        ctx = info.context or {}
        if ctx.get("truncate"):
            max_len = 50
            if len(v) <= max_len:
                return v
            return v[:max_len] + "..."
        return v

    def __repr__(self) -> str:
        return self.model_dump_json(
            indent=2,
            exclude_none=True,
            context={"truncate": True},
        )

    def __bool__(self) -> bool:
        return self.passed
