from __future__ import annotations
import argparse, datetime, logging, os
from type_core.audit_export import to_csv
from type_core.engine import QuizSession
from type_core.errors import InvalidLikertValue
from type_core.normalizer import normalize
from type_core.reporting import write_report
from type_core.typology import TYPE_PROFILES
from type_core import config

SCALE = "[1=strongly disagree, 2=disagree, 3=neutral, 4=agree, 5=strongly agree]"


def ask(prompt: str) -> str:
    return input(prompt + " ").strip().lower()


def _status_line(session: QuizSession) -> str:
    parts = [f"{d.value}:{normalize(v):3d}" for d, v in sorted(session.scores.items(), key=lambda kv: -kv[1])]
    line = " ".join(parts)
    prov = session.provisional()
    if prov is not None:
        cat = prov.top_category
        line += f" | provisional {cat.value} ({TYPE_PROFILES[cat]['name']})"
    return line


def main():
    ap = argparse.ArgumentParser(description="Cognitive-function type quiz")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--out", default="reports")
    ap.add_argument("--verbose", action="store_true")
    a = ap.parse_args()
    logging.basicConfig(level=logging.DEBUG if a.verbose else logging.WARNING, format="[%(levelname)s] %(message)s")

    cfg = config.load_config()
    if a.seed is not None:
        cfg["SEED"] = a.seed
    session = QuizSession(cfg=cfg)
    total = len(session.questions)
    print(f"Type quiz: {total} statements. Answer 1-5, 'b' to go back, 'q' to quit.")
    try:
        while True:
            q = session.current_question()
            if q is None: break
            prev = session.answer_for(q.id)
            prev_txt = f" (current answer: {prev})" if prev is not None else ""
            print(f"\nQuestion {session.position + 1} of {total}{prev_txt}")
            v = ask(f"{q.text}\n{SCALE}")
            if v == "q":
                print("Stopped by user."); return
            if v == "b":
                if session.position == 0:
                    print("Already at the first question.")
                else:
                    session.go_back()
                continue
            try:
                session.answer_current(int(v) if v.isdigit() else v)
            except InvalidLikertValue:
                print("Enter a number from 1 to 5."); continue
            print(_status_line(session))
    except KeyboardInterrupt:
        print("\nStopped by user."); return

    report = session.finalize()
    res = report["result"]
    print(f"\nYour type: {res['determined_type']} - {res['name']} ({res['confidence']}% confidence)")
    print(report["confidence_analysis"]["interpretation"])
    if not res["high_confidence"]:
        print(f"Runner-up: {res['second_best_type']}")
    ts = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    path = write_report(report, os.path.join(a.out, f"report_{ts}.html"))
    with open(os.path.join(a.out, f"answers_{ts}.csv"), "w", encoding="utf-8", newline="") as f:
        f.write(to_csv(session.answer_events))
    print(f"Report saved to: {path}")


if __name__ == "__main__": main()
