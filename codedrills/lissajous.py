"""Generate GIF animations of random Lissajous figures."""

from __future__ import annotations

import argparse
import math
import random
import sys
from collections.abc import Iterator, Sequence
from typing import BinaryIO

from PIL import Image

WHITE_INDEX = 0
BLACK_INDEX = 1
PALETTE = (255, 255, 255, 0, 0, 0)

CYCLES = 5
RES = 0.001
SIZE = 100
NFRAMES = 64
DELAY = 8


def _angles() -> Iterator[float]:
    t = 0.0
    limit = CYCLES * 2 * math.pi
    while t < limit:
        yield t
        t += RES


def render_frames(freq: float) -> list[Image.Image]:
    """Draw the animation frames for a y-oscillator relative frequency."""
    angles = list(_angles())
    xs = [SIZE + int(math.sin(t) * SIZE + 0.5) for t in angles]
    frames = []
    phase = 0.0
    for _ in range(NFRAMES):
        img = Image.new("P", (2 * SIZE + 1, 2 * SIZE + 1), WHITE_INDEX)
        img.putpalette(PALETTE)
        pixels = img.load()
        for t, x in zip(angles, xs):
            y = SIZE + int(math.sin(t * freq + phase) * SIZE + 0.5)
            pixels[x, y] = BLACK_INDEX
        frames.append(img)
        phase += 0.1
    return frames


def lissajous(out: BinaryIO, seed: int | None = None) -> None:
    """Write an animated GIF of a random Lissajous figure to out."""
    freq = random.Random(seed).random() * 3.0
    frames = render_frames(freq)
    frames[0].save(
        out,
        format="GIF",
        save_all=True,
        append_images=frames[1:],
        duration=DELAY * 10,
        loop=NFRAMES,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Write the animation to standard output."""
    parser = argparse.ArgumentParser(prog="lissajous")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    lissajous(sys.stdout.buffer, args.seed)
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())