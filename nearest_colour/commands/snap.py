"""Snap every pixel of an image to its nearest palette colour.

Writes OUTPUT (format from its extension) with each pixel replaced by the
RGB of the nearest palette entry. Alpha is discarded.

Example:
    uv run nearest-colour snap photo.png photo-256.png
    uv run nearest-colour snap photo.png photo-bw.png -p '#000,#fff'
"""

import os
import sys

import numpy as np
from PIL import Image

from nearest_colour.core.env import resolve_matcher
from nearest_colour.core.matcher import Matcher
from nearest_colour.core.report import Report
from nearest_colour.core.types import Command

command = Command(
    name='snap',
    help='Write a copy of an image with every pixel snapped to the palette.',
)


def snap_image(image: Image.Image, matcher: Matcher) -> Image.Image:
    """Return a new RGB image with every pixel replaced by its nearest palette colour."""
    arr = np.array(image.convert('RGB'))
    height, width = arr.shape[:2]

    # Match each distinct colour once
    unique, inverse = np.unique(arr.reshape(-1, 3), axis=0, return_inverse=True)
    # Palette RGB is not range-checked; clip before narrowing to uint8
    table = np.clip(np.array([spec.rgb for spec in matcher.palette], dtype=np.int64), 0, 255).astype(np.uint8)
    snapped = table[matcher.indices(unique)][inverse.reshape(-1)]

    return Image.fromarray(snapped.reshape(height, width, 3))


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('image', help='Path to input image')
    parser.add_argument('output', help='Path to write the snapped image')


@command.run
def run(args) -> Report:
    if not os.path.isfile(args.image):
        print(f'Error: image not found: {args.image}', file=sys.stderr)
        sys.exit(1)

    matcher = resolve_matcher(args.palette)
    try:
        image = Image.open(args.image)
        image.load()
    except OSError as e:
        print(f'Error: cannot read image {args.image}: {e}', file=sys.stderr)
        sys.exit(1)
    snapped = snap_image(image, matcher)
    out_dir = os.path.dirname(args.output)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    snapped.save(args.output)

    report = Report(command='snap', palette_size=len(matcher), source=args.image)
    report.add({'output': args.output, 'width': snapped.width, 'height': snapped.height})
    return report
