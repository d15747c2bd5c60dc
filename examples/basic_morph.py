"""Basic meshmorph usage example.

Builds two synthetic keyframes, drags the centre of a 5x5 mesh across the
image and writes the in-between frames as PNG files.

Run directly with:
    python examples/basic_morph.py [output_dir]
"""
import logging
import sys
from pathlib import Path

import numpy as np

from meshmorph import MorphMesh, MorphSettings, Raster, morph, save_raster, setup_logging

SIZE = 128


def make_keyframes():
    # Horizontal red ramp into a vertical blue ramp, both opaque.
    ramp = np.linspace(0, 0xFFFF, SIZE).astype(np.uint16)
    first = np.zeros((SIZE, SIZE, 4), dtype=np.uint16)
    first[..., 0] = ramp[np.newaxis, :]
    first[..., 3] = 0xFFFF
    last = np.zeros((SIZE, SIZE, 4), dtype=np.uint16)
    last[..., 2] = ramp[:, np.newaxis]
    last[..., 3] = 0xFFFF
    return Raster(first), Raster(last)


def make_mesh() -> MorphMesh:
    # Evenly spaced lattice; the centre point slides down and to the right.
    mesh = MorphMesh()
    coords = np.linspace(0, SIZE, 5)
    for row, y in enumerate(coords):
        for col, x in enumerate(coords):
            mesh.add_correspondence(row, col, (x, y), (x, y))
    mesh.add_correspondence(2, 2, (SIZE / 2, SIZE / 2), (SIZE * 0.6, SIZE * 0.62))
    return mesh


def main(output_dir: str = "morph_frames") -> None:
    logger = setup_logging(logging.INFO)
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    first, last = make_keyframes()
    frames = morph(6, first, last, make_mesh(), settings=MorphSettings(alpha=0.5))
    for i, frame in enumerate([first, *frames, last]):
        path = out / f"frame_{i:02d}.png"
        save_raster(frame, path)
        logger.info("Wrote %s", path)


if __name__ == "__main__":
    main(*sys.argv[1:2])
