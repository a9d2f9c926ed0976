# qrforge

A QR code generator in plain Python. It has no third-party dependencies.

qrforge takes text or bytes and builds a complete QR code matrix. By default it:

- picks the most compact encoding mode (numeric, alphanumeric or byte),
- picks the smallest version (1 to 40) that holds the data,
- computes the Reed–Solomon error correction codewords and interleaves the blocks,
- tries all eight mask patterns and keeps the one with the lowest penalty score.

You can override each of these choices.

## Installation

```
pip install qrforge
```

## Command line

The `qrforge` command prints a QR code to the terminal. It draws two matrix rows per
text line with Unicode block characters and adds a border:

```
qrforge "https://example.com/"
```

Options:

- `--ecl {L,M,Q,H}` sets the error correction level. The default is `Q`.
- `--version N` forces the version, from 1 to 40.
- `--mask N` forces the mask pattern, from 0 to 7.

If you give no text, the command encodes `https://example.com/`. When the data cannot
be encoded, the command prints the error to standard error and exits with status 1.

## Library usage

```python
from qrforge.builder import QRBuilder
from qrforge.tables import ECL, Version

qr = QRBuilder("https://example.com/").ecl(ECL.H).version(Version.V03).build()

print(qr.to_str())   # Unicode rendering with a border
qr.print()           # the same, written to stdout
```

`QRBuilder` accepts `str` (encoded as UTF-8) or bytes. Each setter returns the builder,
so calls can be chained:

- `.ecl(...)` sets the error correction level: `ECL.L`, `ECL.M`, `ECL.Q` or `ECL.H`. The default is `ECL.Q`.
- `.mode(...)` forces a `qrforge.tables.Mode`: `NUMERIC`, `ALPHANUMERIC` or `BYTE`.
- `.version(...)` forces a `qrforge.tables.Version`, from `Version.V01` to `Version.V40`.
- `.mask(...)` forces a `qrforge.masking.Mask`. This is rarely needed.

`qrforge.builder.make_qrcode(data, ecl, version, mode, mask)` does the same as a single
call. Any argument left as `None` is chosen automatically.

### Errors

`build()` and `make_qrcode()` raise subclasses of `QRCodeError`:

- `DataTooLargeError` when no version can hold the data at the chosen level.
- `VersionTooSmallError` when the forced version is too small for the data.

If a forced mode cannot represent the input, for example letters in numeric mode,
a `ValueError` is raised instead.

```python
from qrforge.builder import QRBuilder, QRCodeError

try:
    qr = QRBuilder("x" * 5000).build()
except QRCodeError as exc:
    print(f"cannot encode: {exc}")
```

### Reading the matrix

A `qrforge.matrix.QRCode` is a square grid of `qr.size × qr.size` modules. `qr[row]`
returns a row, which is a list of `qrforge.module.Module`. Each module has two members:

- `value`: `True` for a dark module.
- `module_type`: a `ModuleType`. The types are `DATA`, `FINDER_PATTERN`,
  `ALIGNMENT`, `TIMING`, `FORMAT`, `VERSION`, `DARK_MODULE` and `EMPTY` (separator).

The finished code also records the settings that were used to build it, in
`qr.version`, `qr.ecl`, `qr.mode` and `qr.mask`.

### Lower-level pieces

You can also use the building blocks directly:

| Module | Contents |
| --- | --- |
| `qrforge.encode` | `encode` and `best_encoding` |
| `qrforge.polynomials` | `division` and `structure`, for error correction and interleaving |
| `qrforge.layout` | placement of the function patterns |
| `qrforge.placement` | `place_data`, `place_on_matrix` and `build_matrix` |
| `qrforge.score` | mask penalty scoring |
| `qrforge.tables` | capacity and format tables |

## What it does not do

- It renders to text only. There is no image or SVG output; to draw the code another
  way, read the modules from the matrix.
- It has no Kanji mode.
- It does not read or decode existing QR codes.

## Running the tests

```
pip install -e ".[test]"
pytest
```