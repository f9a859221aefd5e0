"""Tests for ResultsWriter: JSONL showdown results."""

import json

import pytest
from pokerrank.cards import parse_hand
from pokerrank.errors import ConfigError
from pokerrank.results import ResultsWriter, rank_showdown


@pytest.fixture
def hands():
    return {
        "wheel": parse_hand("3H 4H 5D AD 2S"),
        "steel-wheel": parse_hand("3H 4H 5H AH 2H"),
        "ace-high": parse_hand("6D AH TD 4H 2S"),
    }


@pytest.fixture
def writer(tmp_output):
    return ResultsWriter(output_dir=tmp_output, showdown="test-showdown")


class TestRankShowdown:
    def test_strongest_first(self, hands):
        ranked = rank_showdown(hands)
        assert [r.name for r in ranked] == ["steel-wheel", "wheel", "ace-high"]
        assert [r.position for r in ranked] == [1, 2, 3]
        assert ranked[0].category == "straight flush"
        assert ranked[0].hand_rank == [8, 5]
        assert ranked[1].hand_rank == [4, 5]

    def test_ties_share_position(self):
        ranked = rank_showdown({
            "spades": parse_hand("AS QS TS JS KS"),
            "clubs": parse_hand("AC JC TC QC KC"),
            "pair": parse_hand("2S 2H 3H 4C 5D"),
        })
        assert [r.name for r in ranked] == ["spades", "clubs", "pair"]
        assert [r.position for r in ranked] == [1, 1, 3]


class TestResultsWriter:
    def test_creates_file(self, writer, hands, tmp_output):
        path = writer.write_all(rank_showdown(hands))
        assert path == tmp_output / "test-showdown.jsonl"
        assert path.exists()

    def test_one_line_per_hand_plus_summary(self, writer, hands):
        path = writer.write_all(rank_showdown(hands))
        records = [json.loads(line) for line in path.read_text().strip().split("\n")]
        assert len(records) == 4
        assert [r["record_type"] for r in records] == ["hand", "hand", "hand", "summary"]
        for record in records:
            assert record["schema_version"]
            assert record["showdown"] == "test-showdown"
            assert "timestamp" in record

    def test_hand_record_fields(self, writer, hands):
        path = writer.write_all(rank_showdown(hands))
        first = json.loads(path.read_text().split("\n")[0])
        assert first["name"] == "steel-wheel"
        assert first["cards"] == ["3H", "4H", "5H", "AH", "2H"]
        assert first["hand_rank"] == [8, 5]
        assert first["position"] == 1

    def test_summary_lists_all_winners(self, writer):
        ranked = rank_showdown({
            "spades": parse_hand("AS QS TS JS KS"),
            "clubs": parse_hand("AC JC TC QC KC"),
        })
        path = writer.write_all(ranked)
        summary = json.loads(path.read_text().strip().split("\n")[-1])
        assert summary["winner"] == "spades"
        assert summary["winners"] == ["spades", "clubs"]
        assert summary["hand_count"] == 2
        assert "engine_version" in summary

    def test_rerun_replaces_previous_results(self, hands, tmp_output):
        for _ in range(2):
            ResultsWriter(tmp_output, "rerun").write_all(rank_showdown(hands))
        path = tmp_output / "rerun.jsonl"
        records = [json.loads(line) for line in path.read_text().strip().split("\n")]
        assert [r["record_type"] for r in records] == ["hand", "hand", "hand", "summary"]

    @pytest.mark.parametrize("name", ["a/b", "../x", "", ".."])
    def test_rejects_path_like_names(self, tmp_output, name):
        with pytest.raises(ConfigError):
            ResultsWriter(tmp_output, name)
        assert not (tmp_output.parent / "x.jsonl").exists()
