"""ResultsWriter: JSONL showdown results.

One writer per showdown. Writes one JSONL line per ranked hand, strongest
first, plus a summary as the final line. All records include the schema
version and showdown name.
"""

import json
import logging
import re
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path

import pokerrank
from pokerrank.cards import Card
from pokerrank.errors import ConfigError
from pokerrank.evaluator import HandRank, hand_rank, sort_hands

logger = logging.getLogger(__name__)

_SCHEMA_VERSION = "1.0.0"

# Must match the showdown name pattern in schema.json
_NAME_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*\Z")


@dataclass
class RankedHand:
    """One hand's place in a showdown."""

    position: int
    name: str
    cards: list[str]
    category: str
    hand_rank: list[int]


def rank_showdown(hands: dict[str, tuple[Card, ...]]) -> list[RankedHand]:
    """Rank named hands strongest first.

    Hands that tie share a position; the next distinct rank skips ahead
    (1, 1, 3) the way tournament standings do.
    """
    ordered = sort_hands(hands.items(), key=lambda item: item[1])

    ranked: list[RankedHand] = []
    previous: HandRank | None = None
    position = 0
    for index, (name, cards) in enumerate(ordered, start=1):
        rank = hand_rank(cards)
        if rank != previous:
            position = index
            previous = rank
        ranked.append(
            RankedHand(
                position=position,
                name=name,
                cards=[str(c) for c in cards],
                category=rank.name,
                hand_rank=rank.as_list(),
            )
        )
    return ranked


class ResultsWriter:
    """Writes JSONL results for a single showdown.

    Each writer starts a fresh file, so rerunning a showdown replaces the
    previous results instead of appending to them.
    """

    def __init__(self, output_dir: Path, showdown: str):
        if not _NAME_RE.match(showdown):
            raise ConfigError(f"Showdown name {showdown!r} is not a plain file name")
        self._output_dir = Path(output_dir)
        self._showdown = showdown
        self._output_dir.mkdir(parents=True, exist_ok=True)
        self._file_path = self._output_dir / f"{showdown}.jsonl"
        self._file_path.write_text("")

    @property
    def file_path(self) -> Path:
        return self._file_path

    def log_hand(self, ranked: RankedHand) -> None:
        record = asdict(ranked)
        record["schema_version"] = _SCHEMA_VERSION
        record["record_type"] = "hand"
        record["showdown"] = self._showdown
        record["timestamp"] = datetime.now(timezone.utc).isoformat()
        self._append(record)

    def finalize(self, ranked: list[RankedHand]) -> None:
        winners = [r.name for r in ranked if r.position == 1]
        record = {
            "schema_version": _SCHEMA_VERSION,
            "record_type": "summary",
            "showdown": self._showdown,
            "winner": winners[0] if winners else None,
            "winners": winners,
            "hand_count": len(ranked),
            "engine_version": pokerrank.__version__,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        self._append(record)
        logger.info("Wrote showdown %s results to %s", self._showdown, self._file_path)

    def write_all(self, ranked: list[RankedHand]) -> Path:
        for entry in ranked:
            self.log_hand(entry)
        self.finalize(ranked)
        return self._file_path

    def _append(self, record: dict) -> None:
        with open(self._file_path, "a") as f:
            f.write(json.dumps(record, default=str) + "\n")
