from __future__ import annotations

from typing import Annotated, Literal, Union
from urllib.parse import quote

from pydantic import BaseModel, Field, model_validator

# Characters encodeURI leaves untouched besides the unreserved set
_URI_SAFE = ";,/?:@&=+$!*'()#"


# --- Request ---

class RequestOptions(BaseModel):
    endpoint: str
    action: str

    model_config = {"frozen": True}

    def url_for(self, query: str) -> str:
        return f"{self.endpoint}{self.action}{quote(query, safe=_URI_SAFE)}"


# --- Results ---

class MatchEntry(BaseModel):
    text: str
    id: str | None = None


class Candidate(MatchEntry):
    """A disambiguation entry, retrievable with ``fetch_by_id``."""

    id: str


class SingleResult(BaseModel):
    """One headword: every paragraph of its definition, in page order."""

    kind: Literal["single"] = "single"
    items: list[MatchEntry] = Field(default_factory=list)

    @model_validator(mode="after")
    def _no_ids(self) -> SingleResult:
        if any(item.id is not None for item in self.items):
            raise ValueError("single results carry text only")
        return self

    @property
    def multiple_matches(self) -> bool:
        return False


class DisambiguationResult(BaseModel):
    """Several headwords matched; each candidate points at a full entry."""

    kind: Literal["disambiguation"] = "disambiguation"
    items: list[Candidate] = Field(default_factory=list)

    @property
    def multiple_matches(self) -> bool:
        return True


RetrievalResult = Annotated[
    Union[SingleResult, DisambiguationResult],
    Field(discriminator="kind"),
]
