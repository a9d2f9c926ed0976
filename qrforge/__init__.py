"""Pure-Python QR code generation: encoding, error correction, masking and text rendering."""

__version__ = "0.1.0"