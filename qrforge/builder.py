"""High-level entry point for making QR codes, plus a small command line tool."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .encode import Data, best_encoding
from .masking import Mask
from .matrix import QRCode
from .placement import build_matrix
from .tables import ECL, Mode, Version

__all__ = [
    "QRCodeError",
    "DataTooLargeError",
    "VersionTooSmallError",
    "QRBuilder",
    "make_qrcode",
    "main",
]


class QRCodeError(Exception):
    """A QR code could not be created."""


class DataTooLargeError(QRCodeError):
    """The data is too large for any QR code version at the requested level."""

    def __init__(self, message: str = "Data too big to be encoded") -> None:
        super().__init__(message)


class VersionTooSmallError(QRCodeError):
    """The requested version is too small to hold the data."""

    def __init__(self, message: str = "Specified version too low to contain data") -> None:
        super().__init__(message)


def _as_bytes(data: Data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def make_qrcode(
    data: Data,
    ecl: Optional[ECL] = None,
    version: Optional[Version] = None,
    mode: Optional[Mode] = None,
    mask: Optional[Mask] = None,
) -> QRCode:
    """Create a QR code for ``data``.

    Unset options are chosen automatically: the most compact mode, level
    ``ECL.Q``, the smallest version that fits and the best-scoring mask.

    Raises DataTooLargeError if no version can hold the data, and
    VersionTooSmallError if the requested version is too small.
    """
    raw = _as_bytes(data)
    mode = best_encoding(raw) if mode is None else Mode(mode)
    level = ECL.Q if ecl is None else ECL(ecl)

    smallest = Version.fit(mode, level, len(raw))
    if smallest is None:
        raise DataTooLargeError()

    if version is None:
        chosen = smallest
    else:
        chosen = Version(version)
        if chosen < smallest:
            raise VersionTooSmallError()

    return build_matrix(raw, level, mode, chosen, None if mask is None else Mask(mask))


class QRBuilder:
    """Collects options for a QR code; each setter returns the builder itself."""

    def __init__(self, data: Data) -> None:
        self._data = _as_bytes(data)
        self._ecl: Optional[ECL] = None
        self._mode: Optional[Mode] = None
        self._version: Optional[Version] = None
        self._mask: Optional[Mask] = None

    def mode(self, mode: Mode) -> "QRBuilder":
        """Force the encoding mode."""
        self._mode = Mode(mode)
        return self

    def ecl(self, ecl: ECL) -> "QRBuilder":
        """Force the error correction level."""
        self._ecl = ECL(ecl)
        return self

    def version(self, version: Version) -> "QRBuilder":
        """Force the version."""
        self._version = Version(version)
        return self

    def mask(self, mask: Mask) -> "QRBuilder":
        """Force the data mask; rarely needed."""
        self._mask = Mask(mask)
        return self

    def build(self) -> QRCode:
        """Create the QR code with the collected options."""
        return make_qrcode(self._data, self._ecl, self._version, self._mode, self._mask)


def _parse_version(text: str) -> Version:
    try:
        number = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid version: {text!r}") from None
    if not 1 <= number <= 40:
        raise argparse.ArgumentTypeError("version must be between 1 and 40")
    return Version(number - 1)


def _parse_mask(text: str) -> Mask:
    try:
        number = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid mask: {text!r}") from None
    if not 0 <= number <= 7:
        raise argparse.ArgumentTypeError("mask must be between 0 and 7")
    return Mask(number)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print a QR code for the given text to the terminal."""
    parser = argparse.ArgumentParser(
        prog="qrforge", description="Print a QR code to the terminal."
    )
    parser.add_argument("text", nargs="?", default="https://example.com/")
    parser.add_argument("--ecl", choices=[level.name for level in ECL])
    parser.add_argument("--version", type=_parse_version, help="version, 1 to 40")
    parser.add_argument("--mask", type=_parse_mask, help="mask pattern, 0 to 7")
    args = parser.parse_args(argv)

    builder = QRBuilder(args.text)
    if args.ecl is not None:
        builder.ecl(ECL[args.ecl])
    if args.version is not None:
        builder.version(args.version)
    if args.mask is not None:
        builder.mask(args.mask)

    try:
        qr = builder.build()
    except QRCodeError as error:
        print(f"qrforge: {error}", file=sys.stderr)
        return 1

    qr.print()
    return 0