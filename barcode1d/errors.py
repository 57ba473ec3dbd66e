"""
Error classes raised by the barcode codecs.
"""

import builtins


class Barcode1DError(Exception):
    """Base class for all barcode encode/decode errors."""


class UnencodableError(Barcode1DError):
    """The value cannot be represented by the symbology."""


class UnencodableCharactersError(UnencodableError):
    """
    Input is structurally not this symbology.

    Raised for a wrong character set, a wrong length, or a decode input whose
    start/stop framing or run count never matches.
    """


class UndecodableCharactersError(UnencodableError):
    """A decode input is correctly framed but a chunk has no table match."""


class ChecksumError(Barcode1DError):
    """The embedded check digit does not match the payload."""


class NotImplementedError(Barcode1DError, builtins.NotImplementedError):
    """The requested output format is not defined for the symbology."""


class BarcodeNotFoundError(Barcode1DError, KeyError):
    """No barcode class is registered for the requested symbology."""
