"""Unit tests for ratings-file loading and DataFrame export."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from robtool.core.errors import IndexOutOfRange, ScoreOutOfRange
from robtool.io.studies import build_registry, load_studies, parse_records, summary_frame, traffic_light_frame
from robtool.quality.catalog import StudyType


def write_json(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


class TestParseRecords:
    """Tests for record validation."""

    def test_list_payload(self) -> None:
        records = parse_records([{"name": "A", "type": "cohort", "scores": {"outcome": [1, 0, 1]}}])
        assert records[0].study_type == StudyType.COHORT
        assert records[0].scores == {"outcome": [1, 0, 1]}

    def test_wrapped_payload_and_defaults(self) -> None:
        records = parse_records({"studies": [{}]})
        assert records[0].name is None
        assert records[0].study_type == StudyType.CASE_CONTROL
        assert records[0].scores == {}

    def test_bad_type(self) -> None:
        with pytest.raises(ValidationError):
            parse_records([{"type": "rct"}])

    def test_unknown_key_rejected(self) -> None:
        """A misspelt key is an error rather than an unrated study."""
        with pytest.raises(ValidationError):
            parse_records([{"name": "A", "score": {"selection": [1, 1, 1, 1]}}])


class TestBuildRegistry:
    """Tests for replaying ratings into a registry."""

    def test_ratings_applied(self) -> None:
        registry = build_registry(parse_records([
            {"name": "A", "scores": {"selection": [1, 1, 0, 0], "comparability": [2]}},
            {"name": "B", "type": "cohort"},
        ]))
        assert [s.name for s in registry] == ["A", "B"]
        assert registry.current_id == 1
        assert registry.get(1).scores["selection"] == (1, 1, 0, 0)
        assert registry.get(1).scores["exposure"] == (0, 0, 0)
        assert registry.current_total() == 4

    def test_wrong_length(self) -> None:
        with pytest.raises(IndexOutOfRange):
            build_registry(parse_records([{"scores": {"selection": [1, 1]}}]))

    def test_unknown_domain(self) -> None:
        with pytest.raises(IndexOutOfRange):
            build_registry(parse_records([{"scores": {"outcome": [1, 1, 1]}}]))

    def test_out_of_range_rating(self) -> None:
        with pytest.raises(ScoreOutOfRange):
            build_registry(parse_records([{"scores": {"exposure": [1, 2, 0]}}]))


class TestFrames:
    """Tests for DataFrame exports."""

    def test_load_and_export(self, tmp_path: Path) -> None:
        path = write_json(tmp_path / "studies.json", [
            {"name": "A", "scores": {"selection": [1, 1, 1, 1], "comparability": [2], "exposure": [1, 1, 1]}},
            {"name": "B"},
        ])
        registry = load_studies(path)

        lights = traffic_light_frame(registry)
        assert len(lights) == 6
        a_rows = lights[lights["study"] == "A"]
        assert set(a_rows["risk"]) == {"Low"}
        assert set(a_rows["total_score"]) == {9}
        assert set(lights[lights["study"] == "B"]["risk"]) == {"High"}

        summary = summary_frame(registry).set_index("domain")
        assert list(summary.index) == ["selection", "comparability", "exposure"]
        assert summary.loc["selection", "low_risk_percent"] == 50.0
        assert summary.loc["selection", "n_ratings"] == 8

    def test_empty_registry_frames(self, tmp_path: Path) -> None:
        registry = load_studies(write_json(tmp_path / "empty.json", []))
        assert traffic_light_frame(registry).empty
        summary = summary_frame(registry)
        assert list(summary["low_risk_percent"]) == [0.0, 0.0, 0.0]

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError):
            load_studies(path)
