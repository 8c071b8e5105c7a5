import re

from pydantic import BaseModel, ConfigDict, Field

_HTML_COLOR = re.compile(r"#?([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})")


class Color(BaseModel):
    """An RGBA color with float channels in the 0..1 range.

    The zero value (all channels 0) is transparent black.
    """

    r: float = Field(default=0.0, ge=0.0, le=1.0)
    g: float = Field(default=0.0, ge=0.0, le=1.0)
    b: float = Field(default=0.0, ge=0.0, le=1.0)
    a: float = Field(default=0.0, ge=0.0, le=1.0)
    model_config = ConfigDict(frozen=True, from_attributes=True)

    @classmethod
    def from_html(cls, text: str) -> "Color":
        """Parse an HTML-style hex color: ``RGB``, ``RGBA``, ``RRGGBB`` or ``RRGGBBAA``.

        The leading ``#`` is optional and alpha comes last. Raises ``ValueError``
        for anything else.
        """
        match = _HTML_COLOR.fullmatch(text.strip())
        if match is None:
            raise ValueError(f"Invalid HTML color '{text}'")

        digits = match.group(1)
        if len(digits) <= 4:
            digits = "".join(c * 2 for c in digits)
        if len(digits) == 6:
            digits += "ff"

        r, g, b, a = (int(digits[i:i + 2], 16) / 255 for i in range(0, 8, 2))
        return cls(r=r, g=g, b=b, a=a)

    def to_html(self) -> str:
        return "".join(f"{round(c * 255):02x}" for c in (self.r, self.g, self.b, self.a))
