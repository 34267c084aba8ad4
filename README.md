# stegtool

`stegtool` hides a file inside an image. The file is first encrypted with
AES-256-CBC under a key derived from a password (PBKDF2-HMAC-SHA256,
100,000 iterations, random 16-byte salt, random 16-byte IV, PKCS#7
padding). The ciphertext, followed by the salt and the IV, is then written
bit by bit into the least significant bits of the image's pixels, behind a
64-bit length header.

## Installation

```
pip install .
```

## Command line

Embed a file into an image:

```
stegtool --mode embed --input cover.png --output secret.png --data notes.txt
```

Extract it again:

```
stegtool --mode extract --input secret.png --data recovered.txt
```

Short forms are available as well: `-m`, `-i`, `-o`, `-d`, and `-h` for help.

Options needed by each mode:

| mode      | required options                     |
|-----------|--------------------------------------|
| `embed`   | `--input`, `--output`, `--data`      |
| `extract` | `--input`, `--data`                  |

After the options are checked, the tool prompts for a password on standard
input and uses the first whitespace-separated word of the line. The input is
echoed. Extraction only succeeds with the password used for embedding;
otherwise decryption fails and the tool prints the error followed by
`[ERROR] Please try again`.

Usage problems (no mode, an unknown mode, missing options, unknown
arguments) are reported as a `[Usage] ...` line and the tool exits with
status 0. A payload that is too large, an unreadable or unwritable image or
data file, or a failed decryption end with status 1.

### Capacity

An image of `width` × `height` pixels may hold at most
`(height * (width - 1) - 8) // 8` bytes of stored data. The stored data is the
ciphertext (the payload padded up to the next multiple of 16 bytes, a full
extra block when it is already a multiple) plus 32 bytes for the salt and IV.
Payloads that do not fit are refused with `too large input file to embed`.

### Supported images

Images are read and written with Pillow. Embedding and extraction need an
8-bit image with at least two channels (for example RGB or RGBA); grayscale
and 16-bit images are rejected with an `ImageError`.

Save the output in a lossless format such as PNG or BMP; the format follows
the file extension. Lossy formats like JPEG alter the pixel values and
destroy the hidden data.

## Library use

```python
from stegtool.image import Image
from stegtool.lsb_embedder import LSBEmbedder

password = "password"
embedder = LSBEmbedder(password)

img = Image("cover.png")
print(embedder.capacity(img), "bytes available")
embedder.embed(img, b"hidden message")
img.save("secret.png")

restored = embedder.extract(Image("secret.png"))
assert restored == b"hidden message"
```

The modules:

- `stegtool.crypto` — `Cipher` (`encrypt`, `decrypt`, `add_salt_iv`) and
  `CipherError`.
- `stegtool.image` — `Image`, loaded from a path or built with
  `Image.from_array(pixels)`; its `pixels` array is `(height, width, channels)`
  with colour channels in blue-green-red order. Properties `width`, `height`,
  `depth` (8, 16, 32 or -1) and `channels`; `save(path)`. Raises `ImageError`.
- `stegtool.embedder` — the abstract `Embedder` with `embed(img, data)` and
  `extract(img)`.
- `stegtool.lsb_embedder` — `LSBEmbedder(password)` with `capacity`, `embed`
  and `extract`, and `CapacityError`, raised when a payload is too large or an
  image carries no valid length header.
- `stegtool.stego` — `resolve_options(namespace)` turning parsed arguments
  into an `Options` record (or raising `UsageError`), and
  `stego(options, embedder)` running a job on files.
- `stegtool.cli` — `build_parser()` and `main(argv=None)`, which returns the
  exit status.

Progress messages from `LSBEmbedder` go through the `logging` module at INFO
level; `stego` prints its own `[INFO]` lines.

## What it does not do

Only least-significant-bit embedding is provided, one bit per pixel, and the
password is read from standard input without hiding it. There is no way to
pass the password on the command line and no detection of tampering beyond
the padding check that decryption performs.

## Running the tests

```
pip install .[test]
pytest
```