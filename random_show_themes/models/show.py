"""Show model for catalog entries."""

from enum import Enum
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, NonNegativeInt


class ThemeCategory(str, Enum):
    """Category of a theme song, valued by its printed label."""

    OPENING = "OP"
    ENDING = "ED"
    OTHER = "ST"

    def __str__(self) -> str:
        return self.value


class Show(BaseModel):
    """Pydantic model for one show in the catalog."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: NonNegativeInt = Field(
        ...,
        validation_alias=AliasChoices("id", "mal_id"),
        description="Show identifier",
    )
    title: str = Field(..., description="Show title")
    url: Optional[str] = Field(default=None, description="Reference URL")
    opening_themes: List[str] = Field(default_factory=list, description="Opening theme songs")
    ending_themes: List[str] = Field(default_factory=list, description="Ending theme songs")
    other_soundtrack: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("other_soundtrack", "soundtrack"),
        description="Other soundtrack songs",
    )

    @property
    def has_themes(self) -> bool:
        """Whether any of the three theme lists is non-empty."""
        return bool(self.opening_themes or self.ending_themes or self.other_soundtrack)
