from typing import Optional, Union

from pydantic import Field

from openaikit.schema.common import Parameters, Response


class ContentPolicyParameters(Parameters):
    """Parameters for POST /moderations."""
    input: Union[str, list[str]]
    model: Optional[str] = None


class ContentPolicyCategories(Response):
    hate: bool
    hate_threatening: bool = Field(alias="hate/threatening")
    self_harm: bool = Field(alias="self-harm")
    sexual: bool
    sexual_minors: bool = Field(alias="sexual/minors")
    violence: bool
    violence_graphic: bool = Field(alias="violence/graphic")


class ContentPolicyCategoryScores(Response):
    hate: float
    hate_threatening: float = Field(alias="hate/threatening")
    self_harm: float = Field(alias="self-harm")
    sexual: float
    sexual_minors: float = Field(alias="sexual/minors")
    violence: float
    violence_graphic: float = Field(alias="violence/graphic")


class ContentPolicyResult(Response):
    flagged: bool
    categories: ContentPolicyCategories
    category_scores: ContentPolicyCategoryScores


class ContentPolicyResponse(Response):
    """Moderation verdicts, one result per input string."""
    id: str
    model: str
    results: list[ContentPolicyResult]
