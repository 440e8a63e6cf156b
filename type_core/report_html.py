from __future__ import annotations
from html import escape
from typing import Dict, Any, List

from .typology import FUNCTION_INFO, TYPE_PROFILES
from .types import Category, Dimension

TOP_TYPES_SHOWN = 5


def _row_function(d: Dict[str, Any]) -> str:
    return (
        f"<tr><td>{escape(str(d.get('name')))}</td><td>{escape(str(d.get('full_name','')))}</td>"
        f"<td>{float(d.get('raw_score', 0.0)):+.2f}</td><td>{int(d.get('normalized_score', 0))}</td>"
        f"<td>{escape(str(d.get('interpretation','')))}</td></tr>"
    )

def _row_type(d: Dict[str, Any]) -> str:
    return f"<tr><td>{d.get('rank')}</td><td>{escape(str(d.get('type')))}</td><td>{escape(str(d.get('name','')))}</td><td>{float(d.get('score', 0.0)):.2f}</td></tr>"

def _row_stack(d: Dict[str, Any]) -> str:
    return (
        f"<tr><td>{escape(str(d.get('position')))}</td><td>{escape(str(d.get('function')))} "
        f"({escape(str(d.get('full_name','')))})</td><td>{float(d.get('raw_score', 0.0)):+.2f}</td>"
        f"<td>{float(d.get('weight', 0.0)):.1f}</td><td>{float(d.get('weighted_score', 0.0)):+.2f}</td></tr>"
    )

def export_report_html(report: Dict[str, Any], path: str) -> None:
    res = report.get("result", {}) or {}
    conf_an = report.get("confidence_analysis", {}) or {}
    meta = report.get("meta", {}) or {}
    funcs: List[Dict[str, Any]] = report.get("function_scores", []) or []
    types: List[Dict[str, Any]] = report.get("type_scores", []) or []
    stack: List[Dict[str, Any]] = report.get("stack", []) or []

    code = str(res.get("determined_type", ""))
    confidence = int(res.get("confidence", 0) or 0)
    rows_f = "\n".join(_row_function(d) for d in funcs)
    rows_t = "\n".join(_row_type(d) for d in types[:TOP_TYPES_SHOWN])
    rows_s = "\n".join(_row_stack(d) for d in stack)

    runner_up = ""
    if not res.get("high_confidence", False):
        alt = Category.parse(res.get("second_best_type"))
        if alt is not None:
            prof = TYPE_PROFILES[alt]
            runner_up = (
                '<div class="banner">'
                f"<h4>Alternative type: {alt.value}</h4>"
                f"<p><b>{escape(prof['name'])}</b> - {escape(prof['description'])}</p>"
                "</div>"
            )

    dominant = ""
    if stack:
        dim = Dimension.parse(stack[0].get("function"))
        if dim is not None:
            dominant = f"<p><b>Dominant function:</b> {escape(FUNCTION_INFO[dim]['full_name'])} - {escape(FUNCTION_INFO[dim]['description'])}</p>"

    answered = meta.get("answered")
    total = meta.get("total_items")
    answered_txt = f"<p><b>Answered:</b> {answered} / {total}</p>" if answered is not None and total else ""

    html = f"""<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8"/>
<title>Type Report</title>
<style>
 body{{font-family:system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,'Helvetica Neue',Arial}}
 .wrap{{max-width:960px;margin:40px auto;padding:0 16px}}
 h1{{margin:0 0 16px}}
 .overall{{font-size:1.1rem;margin:8px 0 16px}}
 .banner{{padding:12px 16px;border-radius:6px;margin:16px 0;background:#eef3ff;border:1px solid #9bb3f0}}
 table{{border-collapse:collapse;width:100%}}
 th,td{{text-align:left}}
</style>
</head>
<body>
<div class="wrap">
  <h1>{escape(code)} - {escape(str(res.get('name','')))}</h1>
  <p>{escape(str(res.get('description','')))}</p>
  <div class="overall"><b>Match confidence:</b> {confidence}%</div>
  <p>{escape(str(conf_an.get('interpretation','')))}</p>
  {runner_up}
  {dominant}

  <h3>Function stack</h3>
  <table border='1' cellpadding='6' cellspacing='0'>
    <thead><tr><th>Position</th><th>Function</th><th>Raw</th><th>Weight</th><th>Weighted</th></tr></thead>
    <tbody>{rows_s}</tbody>
  </table>

  <h3>Function scores (0-100)</h3>
  <table border='1' cellpadding='6' cellspacing='0'>
    <thead><tr><th>Function</th><th>Name</th><th>Raw</th><th>Score</th><th>Strength</th></tr></thead>
    <tbody>{rows_f}</tbody>
  </table>

  <h3>Type ranking (top {TOP_TYPES_SHOWN})</h3>
  <table border='1' cellpadding='6' cellspacing='0'>
    <thead><tr><th>#</th><th>Type</th><th>Name</th><th>Score</th></tr></thead>
    <tbody>{rows_t}</tbody>
  </table>

  <p><b>Score gap:</b> {float(conf_an.get('first_type_score', 0.0)):.2f} vs {float(conf_an.get('second_type_score', 0.0)):.2f} (difference {float(conf_an.get('score_difference', 0.0)):.2f})</p>
  {answered_txt}
</div>
</body>
</html>"""
    with open(path, "w", encoding="utf-8") as f:
        f.write(html)
