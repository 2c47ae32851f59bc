"""Tests for CLI commands that need no remote model."""

import sys

from scamwatch.__main__ import main
from scamwatch.models import IntelligenceEntry
from scamwatch.store import dump_entries
from tests.fakes import make_entry_payload


def _run(monkeypatch, *argv: str) -> int:
    monkeypatch.setattr(sys, "argv", ["scamwatch", *argv])
    return main()


def test_stats_over_seed_data(monkeypatch, capsys) -> None:
    assert _run(monkeypatch, "stats") == 0

    out = capsys.readouterr().out
    assert "Entries: 3" in out
    assert "Total Reported Loss: $3.4M" in out
    assert "Estimated Recovery: $157.0K" in out


def test_stats_includes_exported_entries(monkeypatch, capsys, tmp_path) -> None:
    export = tmp_path / "batch.json"
    export.write_bytes(
        dump_entries([IntelligenceEntry.model_validate(make_entry_payload(i)) for i in (1, 2)])
    )

    assert _run(monkeypatch, "stats", "--input", str(export)) == 0

    assert "Entries: 5" in capsys.readouterr().out


def test_analyze_unknown_entry_fails(monkeypatch, capsys) -> None:
    assert _run(monkeypatch, "analyze", "--entry-id", "NOPE") == 1

    assert "Entry not found: NOPE" in capsys.readouterr().out


def test_no_command_prints_help(monkeypatch) -> None:
    assert _run(monkeypatch) == 1
