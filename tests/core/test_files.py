from __future__ import annotations

import json
from pathlib import Path

from smartque import core
from smartque.core.files import write_jsonl


def test_write_jsonl_keeps_unicode_and_counts(tmp_path: Path) -> None:
    path = tmp_path / "out" / "quiz.jsonl"
    records = [{"question": "HTML কী?"}, {"question": "CSS?"}]
    assert write_jsonl(path, iter(records)) == 2
    raw = path.read_text(encoding="utf-8")
    assert "HTML কী?" in raw
    assert [json.loads(line) for line in raw.splitlines()] == records


def test_write_jsonl_truncates_existing_file(tmp_path: Path) -> None:
    path = tmp_path / "q.jsonl"
    path.write_text('{"id": 0}\n{"id": -1}\n', encoding="utf-8")
    assert write_jsonl(path, [{"id": 1}]) == 1
    assert path.read_text(encoding="utf-8") == '{"id": 1}\n'


def test_core_exports_only_the_writer() -> None:
    assert "write_jsonl" in core.__all__
    assert not hasattr(core, "read_jsonl")
