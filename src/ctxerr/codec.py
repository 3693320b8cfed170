# SPDX-FileCopyrightText: 2026-present r3fresh <support@r3fresh.dev>
#
# SPDX-License-Identifier: MIT
"""Pluggable encode/decode pairs for error values."""
import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .config import DEBUG

Encoder = Callable[[Any], bytes]
Decoder = Callable[[Union[bytes, str]], "Error"]  # noqa: F821

# Reserved info key under which Error.set_code records the code.
CODE_KEY = "Code"

# Key nesting the wrapped cause inside an error document.
SOURCE_KEY = "ErrorSource"

# Maximum number of nested documents written by to_json.
MAX_CHAIN_DEPTH = 100


@dataclass(frozen=True)
class Codec:
    """Pair of functions used to marshal/unmarshal an Error.

    ``encode`` signals failure by raising. ``decode`` must always return an
    Error, even for input it cannot parse, since it is used to normalize error
    text of unknown origin.
    """

    encode: Encoder
    decode: Decoder


def new_codec(encode: Encoder, decode: Decoder) -> Codec:
    """Create a codec from an encode/decode pair."""
    return Codec(encode=encode, decode=decode)


class ErrorDocument(BaseModel):
    """One level of a serialized Error. The aliases are a stable contract.

    The wrapped cause is nested under SOURCE_KEY and handled level by level in
    ``to_json``/``from_json``, so long chains are never walked recursively.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "ErrorInfo": {"retry": 3, "Code": 507},
                "ErrorCause": "disk full",
                "ErrorSource": {"ErrorCause": "write failed"},
            }
        },
    )

    info: Optional[Dict[str, Any]] = Field(None, alias="ErrorInfo", description="Contextual metadata")
    cause: str = Field("", alias="ErrorCause", description="Bare error message")

    @classmethod
    def from_error(cls, err: "Error") -> "ErrorDocument":  # noqa: F821
        """Build the document for a single Error, without its cause."""
        fields: Dict[str, Any] = {"cause": err.message}
        if err.info:
            fields["info"] = err.info
        return cls(**fields)

    def to_error(self) -> "Error":  # noqa: F821
        """Rebuild a single Error bound to the JSON codec."""
        from .error import Error

        info = dict(self.info) if self.info else None
        code = ""
        if info and CODE_KEY in info:
            code = str(info[CODE_KEY])
        return Error(self.cause, info=info, code=code, codec=JSON_CODEC, config=DEBUG)


def to_json(value: Any) -> bytes:
    """Encode an Error and its cause chain as indented JSON.

    At most MAX_CHAIN_DEPTH documents are nested. Causes past that depth are
    collapsed into a single message joined with ": ".

    Raises:
        TypeError: If value is not an Error
        pydantic_core.PydanticSerializationError: If an info value is not
            JSON serializable
    """
    from .error import Error

    if not isinstance(value, Error):
        raise TypeError(f"to_json expects an Error, got {type(value).__name__}")

    links = list(value.chain())
    if len(links) > MAX_CHAIN_DEPTH:
        rest = links[MAX_CHAIN_DEPTH - 1:]
        links = links[: MAX_CHAIN_DEPTH - 1] + [Error(": ".join(err.message for err in rest))]

    document: Optional[Dict[str, Any]] = None
    for err in reversed(links):
        level = ErrorDocument.from_error(err).model_dump(mode="json", by_alias=True, exclude_unset=True)
        if document is not None:
            level[SOURCE_KEY] = document
        document = level
    return json.dumps(document, indent=1, ensure_ascii=False).encode("utf-8")


def from_json(data: Union[bytes, str]) -> "Error":  # noqa: F821
    """Decode JSON error text.

    Input that is not a valid error document, at any level of its cause
    chain, is kept verbatim as the message.
    """
    from .error import Error

    text = data.decode("utf-8", errors="replace") if isinstance(data, bytes) else data
    try:
        document = json.loads(text)
        levels: List[ErrorDocument] = []
        while document is not None:
            if not isinstance(document, dict):
                raise ValueError("error document must be a JSON object")
            levels.append(ErrorDocument.model_validate(document))
            document = document.get(SOURCE_KEY)
    except (ValidationError, ValueError, RecursionError):
        return Error(text, codec=JSON_CODEC, config=DEBUG)

    err = None
    for level in reversed(levels):
        decoded = level.to_error()
        decoded.underlying = err
        err = decoded
    return err


JSON_CODEC = new_codec(to_json, from_json)
