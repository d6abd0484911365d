"""Poll aggregate root.

Polls are owned by the user who created them; only the owner may change or
delete one.
"""

from datetime import datetime

from pydantic import Field, field_validator

from polly.domain.model.common import DomainModel
from polly.domain.value import PollId, UserId

MIN_OPTIONS = 2
MAX_OPTIONS = 10
MAX_OPTION_LENGTH = 200
MIN_QUESTION_LENGTH = 5
MAX_QUESTION_LENGTH = 500


class Poll(DomainModel):
    """Poll aggregate root.

    Question and options are stored already sanitized.
    """

    id: PollId
    owner_id: UserId
    question: str = Field(min_length=MIN_QUESTION_LENGTH, max_length=MAX_QUESTION_LENGTH)
    options: list[str] = Field(min_length=MIN_OPTIONS, max_length=MAX_OPTIONS)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("options")
    @classmethod
    def validate_options(cls, v: list[str]) -> list[str]:
        """Options must be non-empty, bounded and pairwise distinct."""
        for option in v:
            if not option or len(option) > MAX_OPTION_LENGTH:
                raise ValueError(
                    f"Options must be 1-{MAX_OPTION_LENGTH} characters long"
                )
        if len(set(v)) != len(v):
            raise ValueError("Duplicate options are not allowed")
        return v

    def has_option(self, option_index: int) -> bool:
        """Whether ``option_index`` points at one of this poll's options."""
        return 0 <= option_index < len(self.options)
