"""Request schemas accepted by the release notes pipeline.

Requests arrive as plain mappings (decoded JSON) and are validated here
before any classification runs.
"""

from typing import Annotated, Any, List, Literal, Mapping, Union

import pydantic
from pydantic import AfterValidator, AliasChoices, AnyUrl, BaseModel, Field, TypeAdapter

from relnotes.errors import ValidationError
from relnotes.models.base import Commit

_url_adapter = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    """Reject malformed URLs but keep the caller's spelling."""
    try:
        _url_adapter.validate_python(value)
    except pydantic.ValidationError as e:
        raise ValueError(f"invalid URL: {e.errors()[0]['msg']}") from e
    return value


class CommitPayload(BaseModel):
    """Wire representation of a commit."""

    sha: str = Field(..., min_length=1, description="The commit hash")
    message: str = Field(..., description="The full commit message")
    author: str = Field(..., description="The commit author's name or handle")
    url: Annotated[str, AfterValidator(_check_url)] = Field(..., description="Link to the commit")

    def to_commit(self) -> Commit:
        return Commit(sha=self.sha, message=self.message, author=self.author, url=self.url)


class FixtureRequest(BaseModel):
    """Generate notes from an explicit list of commits."""

    mode: Literal["fixture"]
    repository: str = Field(..., validation_alias=AliasChoices("repository", "repo"))
    range_label: str = Field(..., validation_alias=AliasChoices("rangeLabel", "range_label"))
    commits: List[CommitPayload]

    def to_commits(self) -> List[Commit]:
        return [payload.to_commit() for payload in self.commits]


class RemoteRequest(BaseModel):
    """Fetch commits for a range from a hosted repository."""

    mode: Literal["remote", "github"]
    repository: str = Field(..., validation_alias=AliasChoices("repository", "repo"))
    from_ref: str = Field(..., validation_alias=AliasChoices("from", "from_ref"))
    to_ref: str = Field(..., validation_alias=AliasChoices("to", "to_ref"))


ReleaseNotesRequest = Annotated[Union[FixtureRequest, RemoteRequest], Field(discriminator="mode")]

_request_adapter = TypeAdapter(ReleaseNotesRequest)


def parse_request(raw: Mapping[str, Any]) -> Union[FixtureRequest, RemoteRequest]:
    """Validate a raw request mapping, raising ``ValidationError`` on failure."""
    try:
        return _request_adapter.validate_python(raw)
    except pydantic.ValidationError as e:
        raise ValidationError.from_pydantic(e) from e
