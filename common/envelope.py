"""ABOUTME: Transport-neutral result envelope shared by every weather transport.

The envelope is the only channel through which success, failure and payload
travel back to a caller. Content is a tagged union: a ``text`` item carrying a
string, or a ``json`` item carrying the payload untouched.
"""

import json
from typing import Annotated, Any, Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


OutputFormat = Literal["json", "text"]


class TextContentItem(BaseModel):
    """Plain text content."""

    type: Literal["text"] = "text"
    text: str


class JsonContentItem(BaseModel):
    """Structured content; serialized under the ``json`` key."""

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["json"] = "json"
    payload: Any = Field(alias="json")


ContentItem = Annotated[Union[TextContentItem, JsonContentItem], Field(discriminator="type")]


class ResultEnvelope(BaseModel):
    """Uniform success/error wrapper returned by the weather handler."""

    model_config = ConfigDict(populate_by_name=True)

    content: List[ContentItem]
    is_error: bool = Field(default=False, alias="isError")

    def to_wire(self) -> Dict[str, Any]:
        """Dump the envelope with its wire field names (``json``, ``isError``)."""
        return self.model_dump(by_alias=True)


def dumps_compact(payload: Any) -> str:
    """Serialize a payload the way the text format carries it: compact, non-ASCII kept."""
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def text_item(text: str) -> TextContentItem:
    return TextContentItem(text=text)


def json_item(payload: Any) -> JsonContentItem:
    return JsonContentItem(payload=payload)


def package_result(fmt: OutputFormat, payload: Any, is_error: bool = False) -> ResultEnvelope:
    """Wrap a payload into an envelope using the requested output format.

    Args:
        fmt: "text" stringifies the payload into a single text item,
            "json" carries it as a single structured item
        payload: Normalized result or error payload
        is_error: Whether the envelope reports a failure

    Returns:
        ResultEnvelope with exactly one content item
    """
    if fmt == "text":
        item: ContentItem = text_item(dumps_compact(payload))
    else:
        item = json_item(payload)
    return ResultEnvelope(content=[item], is_error=is_error)


__all__ = [
    "OutputFormat",
    "TextContentItem",
    "JsonContentItem",
    "ContentItem",
    "ResultEnvelope",
    "dumps_compact",
    "text_item",
    "json_item",
    "package_result",
]
