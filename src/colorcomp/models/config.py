"""Converter configuration model."""

from pydantic import BaseModel, ConfigDict, Field

from .enums import HuePolicy


class ConverterConfig(BaseModel):
    """Settings for a single conversion run.

    Built from command line options; never read from or written to disk.
    """

    model_config = ConfigDict(frozen=True)

    hue_policy: HuePolicy = Field(
        default=HuePolicy.BLACK,
        description=(
            "Handling of hue values outside [0, 360] when converting from HSV. "
            "'black' keeps the undefined-sextant fallback, 'wrap' reduces the hue modulo 360."
        ),
    )
