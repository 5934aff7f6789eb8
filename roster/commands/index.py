"""Display positions in the visible contact list."""

from pydantic import BaseModel, ConfigDict, Field


class Index(BaseModel):
    """A position in the visible list.

    Stored zero-based; users see one-based positions.
    """

    model_config = ConfigDict(frozen=True)

    zero_based: int = Field(..., ge=0, description="Zero-based position")

    @classmethod
    def from_zero_based(cls, position: int) -> "Index":
        return cls(zero_based=position)

    @classmethod
    def from_one_based(cls, position: int) -> "Index":
        """Build from a user-facing position.

        Raises:
            pydantic.ValidationError: If ``position`` is less than 1
        """
        return cls(zero_based=position - 1)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1
