"""Media-type-tagged image payloads exchanged with the remote models."""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass
from typing import Any

_DATA_URL_HEADER = re.compile(r"^data:(?P<mime>[^;,]+)(?:;[^,]*)?;base64$")


@dataclass(slots=True, frozen=True)
class InlineImage:
    """Base64 image data plus its declared media type.

    Values are passed through untouched: whatever media type comes in is the
    media type that goes out, no transcoding happens here.
    """

    mime_type: str
    data: str

    @classmethod
    def from_bytes(cls, raw: bytes, mime_type: str) -> "InlineImage":
        return cls(mime_type=mime_type, data=base64.b64encode(raw).decode("ascii"))

    @classmethod
    def from_data_url(cls, data_url: str) -> "InlineImage":
        """Parse a ``data:<mime>;base64,<payload>`` string."""

        header, sep, payload = data_url.partition(",")
        if not sep or not payload:
            raise ValueError("Invalid data URL")
        match = _DATA_URL_HEADER.match(header)
        if match is None:
            raise ValueError("Could not parse MIME type from data URL")
        return cls(mime_type=match.group("mime"), data=payload)

    def to_data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"

    def to_part(self) -> dict[str, Any]:
        """Return the generation API's inline data part."""

        return {"inlineData": {"mimeType": self.mime_type, "data": self.data}}

    def raw_bytes(self) -> bytes:
        try:
            return base64.b64decode(self.data, validate=True)
        except (ValueError, binascii.Error) as exc:
            raise ValueError("Image payload is not valid base64.") from exc
