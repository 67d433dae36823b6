"""Map sampled pixels to the nearest palette colour. Output percentages.

Samples up to --samples pixels (default 10,000) from the image and maps
each to the nearest palette entry (RGB Euclidean, first entry wins ties).
Alpha is discarded; the image is converted to RGB first.

Output: top --top palette colours (default 10) with their share of the sample.

Example:
    uv run nearest-colour census screenshot.png
    uv run nearest-colour census screenshot.png -p 'red=#f00,white=#fff' --json
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
    name='census',
    help='Map sampled image pixels to the nearest palette colour. Output percentages.',
)

SAMPLE_SIZE = 10000
TOP_N = 10


def census(image: Image.Image, matcher: Matcher, n_samples: int = SAMPLE_SIZE) -> list[dict]:
    """Sample image pixels, return palette entries with their percentage, most common first."""
    arr = np.array(image.convert('RGB'))
    pixels = arr.reshape(-1, 3)

    n = min(n_samples, len(pixels))
    if len(pixels) > n:
        indices = np.random.default_rng(42).choice(len(pixels), n, replace=False)
        pixels = pixels[indices]

    nearest = matcher.indices(pixels)
    counts = np.bincount(nearest, minlength=len(matcher))
    total = int(counts.sum())

    rows = []
    # stable sort keeps palette order among equal counts
    for i in np.argsort(-counts, kind='stable'):
        if counts[i] == 0:
            break
        spec = matcher.palette[i]
        rows.append(
            {
                'index': int(i),
                'value': spec.source,
                'name': spec.name,
                'pct': round(float(counts[i]) / total * 100.0, 1),
            }
        )
    return rows


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('image', help='Path to image (PNG/JPG/...)')
    parser.add_argument('-n', '--samples', type=int, default=SAMPLE_SIZE, help='Pixels to sample')
    parser.add_argument('-t', '--top', type=int, default=TOP_N, help='Number of colours to report')


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
    report = Report(command='census', palette_size=len(matcher), source=args.image)
    for row in census(image, matcher, args.samples)[: args.top]:
        report.add(row)
    return report
