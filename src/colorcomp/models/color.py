"""Color model with RGB, HEX and HSV conversions."""

import logging
import math
import string

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from colorcomp.exceptions import MalformedDigitsError, MalformedLengthError, wrap_pydantic_error

from .enums import HuePolicy

logger = logging.getLogger(__name__)

HEX_DIGITS = frozenset(string.hexdigits)

# (channel name, offset into the 6-character payload)
HEX_SEGMENTS = (("red", 0), ("green", 2), ("blue", 4))


def _to_channel(component: float) -> int:
    """Scale a [0, 1] component to a channel, rounding half away from zero.

    Results outside [0, 255] (including infinities) saturate; NaN becomes 0.
    """
    scaled = component * 255.0
    if math.isnan(scaled) or scaled <= 0.0:
        return 0
    if scaled >= 255.0:
        return 255
    return math.floor(scaled + 0.5)


def _sextant_components(
    hue: float, chroma: float, secondary: float
) -> tuple[float, float, float]:
    """Select (r', g', b') for the 60-degree sextant that contains ``hue``.

    Sextants are closed on the upper bound, so 60 belongs to the first and
    360 to the last. Hue outside [0, 360] (or NaN) matches no sextant.
    """
    if not 0.0 <= hue <= 360.0:
        logger.warning(f"Hue {hue} is outside [0, 360]; chroma components set to zero")
        return (0.0, 0.0, 0.0)

    if hue <= 60.0:
        return (chroma, secondary, 0.0)
    if hue <= 120.0:
        return (secondary, chroma, 0.0)
    if hue <= 180.0:
        return (0.0, chroma, secondary)
    if hue <= 240.0:
        return (0.0, secondary, chroma)
    if hue <= 300.0:
        return (secondary, 0.0, chroma)
    return (chroma, 0.0, secondary)


class Color(BaseModel):
    """Standard 8-bit RGB color model.

    Uses standard 8-bit RGB (0-255) as the stored representation. HEX and HSV
    are derived on demand; every constructor and conversion returns a new
    instance.

    The model is frozen, so colors compare and hash by value.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, strict=True, description="Red (0-255)")
    g: int = Field(ge=0, le=255, strict=True, description="Green (0-255)")
    b: int = Field(ge=0, le=255, strict=True, description="Blue (0-255)")

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a color from three 0-255 channel values.

        Raises:
            ChannelValueError: If a channel is not an integer in 0-255
        """
        try:
            return cls(r=r, g=g, b=b)
        except ValidationError as e:
            raise wrap_pydantic_error(e) from e

    @classmethod
    def from_hex(cls, code: str) -> "Color":
        """Parse a hex color code such as 'FF5733' or '#FF5733'.

        Leading '#' characters are stripped; the remainder must be exactly
        six hexadecimal digits, read as red, green and blue pairs. Length is
        counted in characters, not UTF-8 bytes, so three non-ASCII characters
        fail the length check rather than the digit check.

        Raises:
            MalformedLengthError: If the payload is not 6 characters long
            MalformedDigitsError: If a channel pair is not base-16

        Example:
            >>> Color.from_hex("#FF5733").to_rgb()
            (255, 87, 51)
        """
        payload = code.lstrip("#")
        if len(payload) != 6:
            raise MalformedLengthError(code, len(payload))

        prefix_length = len(code) - len(payload)
        channels = []
        for channel, offset in HEX_SEGMENTS:
            segment = payload[offset:offset + 2]
            if not all(ch in HEX_DIGITS for ch in segment):
                raise MalformedDigitsError(code, segment, channel, prefix_length + offset)
            channels.append(int(segment, 16))

        logger.debug(f"Parsed hex {code!r} as {channels}")
        return cls(r=channels[0], g=channels[1], b=channels[2])

    @classmethod
    def from_hsv(
        cls,
        h: float,
        s: float,
        v: float,
        hue_policy: HuePolicy = HuePolicy.BLACK,
    ) -> "Color":
        """Create a color from hue (degrees), saturation and value.

        Hue is expected in [0, 360], saturation and value in [0, 1]. With
        ``HuePolicy.BLACK`` a hue outside [0, 360] contributes no chroma, so
        the result is the grey level ``v - v * s`` (black when s = 1).
        ``HuePolicy.WRAP`` reduces a finite hue modulo 360 first.

        Channels are rounded half away from zero and clamped to 0-255, so
        this never raises.

        Args:
            h: Hue in degrees
            s: Saturation
            v: Value (brightness)
            hue_policy: Handling of out-of-domain hue

        Returns:
            Color: The converted color
        """
        if hue_policy is HuePolicy.WRAP and math.isfinite(h):
            h = h % 360.0

        chroma = v * s
        secondary = chroma * (1.0 - abs((h / 60.0) % 2.0 - 1.0))
        match = v - chroma

        r_prime, g_prime, b_prime = _sextant_components(h, chroma, secondary)

        color = cls(
            r=_to_channel(r_prime + match),
            g=_to_channel(g_prime + match),
            b=_to_channel(b_prime + match),
        )
        logger.debug(f"HSV({h}, {s}, {v}) -> {color}")
        return color

    def to_hex(self) -> str:
        """Convert to hex color string (e.g., '#FF0000').

        Returns:
            str: Hex color string in format '#RRGGBB', uppercase

        Example:
            >>> Color(r=255, g=0, b=0).to_hex()
            '#FF0000'
        """
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def to_rgb(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_hsv(self) -> tuple[float, float, float]:
        """Convert to an HSV tuple.

        Returns:
            tuple[float, float, float]: Hue in [0, 360), saturation and
            value in [0, 1]

        Example:
            >>> Color(r=255, g=0, b=0).to_hsv()
            (0.0, 1.0, 1.0)
        """
        r = self.r / 255.0
        g = self.g / 255.0
        b = self.b / 255.0

        max_c = max(r, g, b)
        min_c = min(r, g, b)
        delta = max_c - min_c

        # Floored modulo keeps the red-sector hue non-negative
        if delta == 0.0:
            hue = 0.0
        elif max_c == r:
            hue = 60.0 * (((g - b) / delta) % 6.0)
        elif max_c == g:
            hue = 60.0 * (((b - r) / delta) + 2.0)
        else:
            hue = 60.0 * (((r - g) / delta) + 4.0)

        saturation = 0.0 if max_c == 0.0 else delta / max_c

        return (hue, saturation, max_c)

    def to_display_string(self) -> str:
        """Canonical display form, e.g. 'RGB(255, 87, 51)'."""
        return f"RGB({self.r}, {self.g}, {self.b})"

    def __str__(self) -> str:
        return self.to_display_string()
