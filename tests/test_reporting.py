from __future__ import annotations

import csv
import io
import json

from type_core.audit_export import to_csv, to_json
from type_core.engine import QuizSession
from type_core.reporting import LOW_CONFIDENCE_TEXT, build_report, write_report
from type_core.types import AnswerEvent

from tests.conftest import build_synthetic_bank

MOCK_VECTOR = {"Ni": 15, "Ne": -5, "Si": -10, "Se": -15, "Ti": 10, "Te": 5, "Fi": -5, "Fe": 0}


def test_report_contents_for_mock_vector():
    rep = build_report(MOCK_VECTOR, meta={"answered": 64, "total_items": 64})
    res = rep["result"]
    assert res["determined_type"] == "INFJ"
    assert res["second_best_type"] == "INTJ"
    assert res["confidence"] == 4
    assert res["high_confidence"] is False
    assert rep["confidence_analysis"]["interpretation"] == LOW_CONFIDENCE_TEXT
    assert rep["confidence_analysis"]["score_difference"] == 5.0

    funcs = rep["function_scores"]
    assert [f["name"] for f in funcs][0] == "Ni"
    assert funcs[0]["normalized_score"] == 88
    assert [f["normalized_score"] for f in funcs] == sorted((f["normalized_score"] for f in funcs), reverse=True)

    types = rep["type_scores"]
    assert len(types) == 16
    assert types[0]["rank"] == 1 and types[0]["type"] == "INFJ"
    assert [s["function"] for s in rep["stack"]] == ["Ni", "Fe", "Ti", "Se"]
    assert rep["meta"]["answered"] == 64
    assert rep["answer_events"] is None


def test_finalize_embeds_answer_events():
    bank = build_synthetic_bank(per_dimension=1)
    s = QuizSession(bank, cfg={"SEED": 3})
    while s.current_question() is not None:
        s.answer_current(4)
    rep = s.finalize()
    assert rep["meta"] == {"total_items": 8, "answered": 8}
    assert len(rep["answer_events"]) == 8
    assert {e["question_id"] for e in rep["answer_events"]} == {q.id for q in bank}


def test_write_report_creates_html_and_json(tmp_path):
    rep = build_report(MOCK_VECTOR)
    out = tmp_path / "nested" / "report.html"
    path = write_report(rep, str(out))
    assert path == str(out)
    html = out.read_text(encoding="utf-8")
    assert "INFJ" in html
    assert "Alternative type: INTJ" in html
    sidecar = json.loads(out.with_suffix(".json").read_text(encoding="utf-8"))
    assert sidecar["result"]["determined_type"] == "INFJ"


def test_audit_export_accepts_dicts_and_events():
    events = [
        AnswerEvent(t="2024-01-01T00:00:00+00:00", question_id="Ni_0", dimension="Ni", value=5,
                    is_reversed=False, previous_value=None, delta=2.2974, score_after=2.2974),
        {"question_id": "Ni_0", "dimension": "Ni", "value": "2", "previous_value": 5, "delta": -3.29, "score_after": -1.0},
    ]
    rows = list(csv.DictReader(io.StringIO(to_csv(events))))
    assert len(rows) == 2
    assert list(rows[0]) == ["t", "question_id", "dimension", "value", "is_reversed", "previous_value", "delta", "score_after"]
    assert rows[0]["previous_value"] == ""
    assert rows[1]["previous_value"] == "5"

    payload = to_json(events)["events"]
    assert payload[1]["value"] == 2
    assert payload[1]["is_reversed"] is False
    assert payload[0]["delta"] == 2.2974
