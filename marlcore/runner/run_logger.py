"""Run artifact logger — writes structured files into {base_dir}/{run_id}/.

Produces:
  - config.json          Experiment config snapshot
  - metrics.jsonl        Per-player turn records (append)
  - events.jsonl         Episode / experiment boundary records (append)
  - episode_summary.json Per-player episode totals (rewritten as players report)

Uses only stdlib (json, pathlib, datetime). No database dependency.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


class RunLogger:
    """Writes experiment artifacts to a run directory."""

    def __init__(self, base_dir: str | Path, run_id: str) -> None:
        self._run_id = run_id
        self._run_dir = Path(base_dir) / run_id
        self._run_dir.mkdir(parents=True, exist_ok=True)
        self._metrics_path = self._run_dir / "metrics.jsonl"
        self._events_path = self._run_dir / "events.jsonl"
        self._summary: dict[str, Any] = {}

    @property
    def run_id(self) -> str:
        return self._run_id

    @property
    def run_dir(self) -> Path:
        return self._run_dir

    # ------------------------------------------------------------------
    # Config snapshot
    # ------------------------------------------------------------------

    def write_config(self, config_dict: dict[str, Any]) -> None:
        """Write the experiment config as config.json."""
        payload = {
            "written_at": datetime.now(timezone.utc).isoformat(),
            **config_dict,
        }
        (self._run_dir / "config.json").write_text(
            json.dumps(payload, indent=2, default=str), encoding="utf-8"
        )

    # ------------------------------------------------------------------
    # Turn metrics (append)
    # ------------------------------------------------------------------

    def log_step_metrics(self, records: list[dict[str, Any]]) -> None:
        """Append turn metric records to metrics.jsonl."""
        self._append(self._metrics_path, records)

    # ------------------------------------------------------------------
    # Events (append)
    # ------------------------------------------------------------------

    def log_events(self, events: list[dict[str, Any]]) -> None:
        """Append boundary events to events.jsonl."""
        self._append(self._events_path, events)

    # ------------------------------------------------------------------
    # Episode summary (merged)
    # ------------------------------------------------------------------

    def write_episode_summary(self, summary: dict[str, Any]) -> None:
        """Merge ``summary`` into episode_summary.json.

        Per-player hooks sharing this logger each report their own key, so
        the file is rewritten with everything reported so far.
        """
        if not summary:
            return
        self._summary.update(summary)
        payload = {
            "written_at": datetime.now(timezone.utc).isoformat(),
            **self._summary,
        }
        (self._run_dir / "episode_summary.json").write_text(
            json.dumps(payload, indent=2, default=str), encoding="utf-8"
        )

    @staticmethod
    def _append(path: Path, records: list[dict[str, Any]]) -> None:
        if not records:
            return
        with path.open("a", encoding="utf-8") as f:
            for rec in records:
                f.write(json.dumps(rec, default=str) + "\n")
