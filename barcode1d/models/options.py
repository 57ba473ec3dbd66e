"""
Options accepted by every barcode class.
"""

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from barcode1d.config import get_settings


class BarcodeOptions(BaseModel):
    """
    Immutable encoding/rendering options.

    Character defaults and ``wn_ratio`` come from the library settings so they
    can be changed through the environment; explicit values always win.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Rendering
    line_character: str = Field(
        default_factory=lambda: get_settings().line_character, min_length=1
    )
    space_character: str = Field(
        default_factory=lambda: get_settings().space_character, min_length=1
    )
    w_character: str = Field(default_factory=lambda: get_settings().w_character, min_length=1)
    n_character: str = Field(default_factory=lambda: get_settings().n_character, min_length=1)
    wn_ratio: Literal[2, 3] = Field(
        default_factory=lambda: get_settings().wn_ratio,
        description="Units per wide element when converting w/n patterns to runs",
    )

    # Checksum handling
    checksum_included: bool = Field(False, description="Value already ends with its check digit")
    skip_checksum: bool = Field(False, description="Omit the check digit where it is optional")

    @classmethod
    def build(
        cls,
        options: "BarcodeOptions | Mapping[str, Any] | None" = None,
        **overrides: Any,
    ) -> "BarcodeOptions":
        """Merge an options object or mapping with keyword overrides."""
        if isinstance(options, BarcodeOptions):
            if not overrides:
                return options
            base = options.model_dump(exclude_unset=True)
        else:
            base = dict(options or {})
        return cls(**{**base, **overrides})
