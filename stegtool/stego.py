"""Resolving the tool's options and running an embed or extract job."""

from dataclasses import dataclass
from pathlib import Path

from .image import Image

_REQUIRED = {
    "embed": ("input", "output", "data"),
    "extract": ("input", "data"),
}


class UsageError(Exception):
    """Raised when the command line does not describe a runnable job."""


@dataclass(frozen=True)
class Options:
    """A fully resolved job: mode, cover image, output image and data file."""

    mode: str
    input: str
    data: str
    output: str | None = None


def resolve_options(namespace):
    """Check parsed arguments for the chosen mode and return :class:`Options`."""
    mode = getattr(namespace, "mode", None)
    if mode is None:
        raise UsageError("Please enter a mode")
    if mode not in _REQUIRED:
        raise UsageError("no such mode")

    values = {name: getattr(namespace, name, None) for name in ("input", "output", "data")}
    missing = [name for name in _REQUIRED[mode] if values[name] is None]
    if missing:
        raise UsageError("missing options " + " ".join(f"--{name}" for name in missing))

    output = values["output"] if mode == "embed" else None
    return Options(mode=mode, input=values["input"], data=values["data"], output=output)


def stego(options, embedder):
    """Embed the data file into the image, or extract it back out."""
    if options.mode not in _REQUIRED:
        raise UsageError("no such mode")

    print("[INFO] loading input image...")
    img = Image(options.input)

    if options.mode == "embed":
        try:
            payload = Path(options.data).read_bytes()
        except OSError as exc:
            raise OSError("can't open input data file") from exc
        print("[INFO] Loading input file...")
        print("[INFO] Embedding data file...")
        embedder.embed(img, payload)
        print("[INFO] saving output image...")
        img.save(options.output)
    else:
        print("[INFO] Extracting data...")
        payload = embedder.extract(img)
        print("[INFO] Writing data to file...")
        Path(options.data).write_bytes(payload)