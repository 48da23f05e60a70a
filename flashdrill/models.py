"""
Data model for a single flashcard.
"""

from pydantic import BaseModel, ConfigDict, Field


class Flashcard(BaseModel):
    """
    A term/definition pair with its cumulative mistake counter.

    Terms and definitions are compared byte-exact; uniqueness of both is
    maintained by the callers that add cards, not by the model itself.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    term: str = Field(
        ...,
        description="Prompt side of the card (what the user is asked).",
    )
    definition: str = Field(
        ...,
        description="Answer side of the card.",
    )
    mistakes: int = Field(
        default=0,
        ge=0,
        description="Wrong answers since creation or the last reset.",
    )

    def as_record(self) -> list[str]:
        """Return the card as a ``[term, definition, mistakes]`` CSV row."""
        return [self.term, self.definition, str(self.mistakes)]
