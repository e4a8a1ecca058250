"""Tests for the mock detector."""

import pytest

from ppeguard.detector import JITTER_MAX_CONF, JITTER_MIN_CONF, MOCK_SCENE, MockDetector
from ppeguard.types import Detection


class TestMockDetector:
    def test_labels_and_boxes_fixed(self):
        dets = MockDetector(seed=1).detect("any.jpg")
        assert [d.label for d in dets] == [d.label for d in MOCK_SCENE]
        assert [d.bbox for d in dets] == [d.bbox for d in MOCK_SCENE]

    def test_same_seed_reproducible(self):
        a = MockDetector(seed=42).detect("a.jpg")
        b = MockDetector(seed=42).detect("a.jpg")
        assert a == b

    def test_jitter_changes_between_calls(self):
        detector = MockDetector(seed=3)
        first = [d.confidence for d in detector.detect("a.jpg")]
        second = [d.confidence for d in detector.detect("a.jpg")]
        assert first != second

    def test_jitter_window_and_clamp(self):
        detector = MockDetector(seed=0)
        for _ in range(50):
            for det, base in zip(detector.detect("a.jpg"), MOCK_SCENE):
                assert JITTER_MIN_CONF <= det.confidence <= JITTER_MAX_CONF
                assert abs(det.confidence - base.confidence) <= 0.1 + 1e-9
                assert isinstance(det.confidence, float)

    def test_clamps_low_confidence(self):
        scene = [Detection("helmet", 0.05), Detection("person", 1.0)]
        dets = MockDetector(seed=0, jitter=0.02, detections=scene).detect("a.jpg")
        assert dets[0].confidence == JITTER_MIN_CONF
        assert dets[1].confidence == JITTER_MAX_CONF

    def test_zero_jitter_returns_base(self):
        assert MockDetector(jitter=0).detect("a.jpg") == list(MOCK_SCENE)

    def test_negative_jitter_rejected(self):
        with pytest.raises(ValueError):
            MockDetector(jitter=-0.1)

    def test_negative_seed_rejected(self):
        with pytest.raises(ValueError, match="seed must be >= 0"):
            MockDetector(seed=-1)

    def test_name(self):
        assert MockDetector().name == "mock"
