"""Tests for JSON export of analysis results."""

import json

from ppeguard.analyzer import ComplianceAnalyzer
from ppeguard.detector import MockDetector
from ppeguard.persistence import report_to_dict, result_to_dict, save_result


def _result(detections, env="construction"):
    return ComplianceAnalyzer(detector=MockDetector(jitter=0)).analyze_detections(detections, env)


class TestReportToDict:
    def test_keys_and_values(self, scene_without_boots):
        data = report_to_dict(_result(scene_without_boots).report)
        assert data["person_present"] is True
        assert data["compliance_score"] == 80
        assert data["is_compliant"] is False
        assert data["missing_categories"] == ["foot_protection"]
        assert data["detected_categories"] == sorted(
            ["head_protection", "visibility", "hand_protection", "eye_protection"]
        )
        assert data["total_required"] == 5
        assert data["total_detected"] == 4
        assert data["profile"] == "construction"

    def test_detected_items(self, full_scene):
        items = report_to_dict(_result(full_scene).report)["detected_items"]
        assert items[0] == {
            "item": "helmet",
            "category": "head_protection",
            "confidence": 0.88,
            "bbox": [120, 60, 80, 60],
        }


class TestResultToDict:
    def test_json_serializable(self, full_scene):
        data = result_to_dict(_result(full_scene))
        text = json.dumps(data)
        assert json.loads(text) == data

    def test_recommendations(self, full_scene):
        recs = result_to_dict(_result(full_scene))["recommendations"]
        assert [(r["type"], r["priority"]) for r in recs] == [("success", "low"), ("info", "medium")]

    def test_raw_detections_included(self, full_scene):
        dets = result_to_dict(_result(full_scene))["detections"]
        assert dets[0]["label"] == "person"
        assert len(dets) == 6

    def test_image_info_null_without_image(self, full_scene):
        assert result_to_dict(_result(full_scene))["image_info"] is None

    def test_image_info(self, image_file):
        result = ComplianceAnalyzer(detector=MockDetector(seed=0)).analyze_image(image_file)
        info = result_to_dict(result)["image_info"]
        assert info["width"] == 64
        assert info["height"] == 48
        assert info["format"] == "png"


class TestSaveResult:
    def test_writes_file(self, tmp_path, full_scene):
        path = save_result(_result(full_scene), tmp_path / "out" / "report.json")
        assert path.exists()
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        assert data["compliance"]["is_compliant"] is True
        assert data["work_environment"] == "construction"
