"""Shared fixtures for ppeguard tests.

All detections are synthetic; no vision models needed.
"""

import pytest

from ppeguard.types import Detection


@pytest.fixture
def full_scene():
    """Fully equipped worker, as in the mock detector's base scene."""
    return [
        Detection("person", 0.95, (100, 50, 200, 400)),
        Detection("helmet", 0.88, (120, 60, 80, 60)),
        Detection("safety vest", 0.92, (110, 120, 180, 120)),
        Detection("gloves", 0.75, (80, 350, 60, 40)),
        Detection("safety glasses", 0.82, (140, 100, 60, 20)),
        Detection("boots", 0.78, (130, 420, 80, 60)),
    ]


@pytest.fixture
def scene_without_boots(full_scene):
    return [d for d in full_scene if d.label != "boots"]


@pytest.fixture
def make_detection():
    """Factory fixture for single detections with a default box."""
    def _make(label: str, confidence: float = 0.9, bbox=(0.0, 0.0, 10.0, 10.0)) -> Detection:
        return Detection(label=label, confidence=confidence, bbox=bbox)
    return _make


@pytest.fixture
def image_file(tmp_path):
    """Small PNG on disk."""
    from PIL import Image

    path = tmp_path / "site.png"
    Image.new("RGB", (64, 48), color=(200, 180, 40)).save(path)
    return path
