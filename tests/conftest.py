import sys
from pathlib import Path

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def gradient_image():
    """A 40x60 RGBA image whose red channel encodes the column index."""
    height, width = 40, 60
    image = np.zeros((height, width, 4), dtype=np.uint8)
    image[..., 0] = np.arange(width, dtype=np.uint8)[None, :]
    image[..., 1] = np.arange(height, dtype=np.uint8)[:, None]
    image[..., 2] = 128
    image[..., 3] = 255
    return image
