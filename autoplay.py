# autoplay.py
from __future__ import annotations
import argparse, datetime, logging, os, random
from typing import Dict, Optional
from type_core.engine import QuizSession
from type_core.reporting import write_report
from type_core.typology import COGNITIVE_STACKS
from type_core.types import Category, Dimension, Question
from type_core import config

# agreement a respondent of a given type shows per stack position; others sit at 2
AGREEMENT_BY_POSITION = (5, 4, 3, 2)
DEFAULT_AGREEMENT = 2


def _new_run_id() -> str:
    return datetime.datetime.now().strftime("run_%Y%m%d_%H%M%S")


def target_agreement(category: Category) -> Dict[Dimension, int]:
    levels = {d: DEFAULT_AGREEMENT for d in Dimension}
    for dim, level in zip(COGNITIVE_STACKS[category], AGREEMENT_BY_POSITION):
        levels[dim] = level
    return levels


def answer_for(question: Question, levels: Dict[Dimension, int], rng: Optional[random.Random] = None, noise: float = 0.0) -> int:
    dim = Dimension.parse(question.dimension)
    v = levels.get(dim, 3) if dim is not None else 3
    if rng is not None and noise > 0 and rng.random() < noise:
        v += rng.choice((-1, 1))
    v = max(1, min(5, v))
    # a respondent who agrees with the trait disagrees with its reversed wording
    return 6 - v if question.is_reversed else v


def play(category: Category, *, noise: float = 0.0, seed: Optional[int] = None, questions=None) -> QuizSession:
    cfg = {"SEED": seed} if seed is not None else {}
    session = QuizSession(questions, cfg=cfg)
    rng = random.Random(seed)
    levels = target_agreement(category)
    while True:
        q = session.current_question()
        if q is None: break
        session.answer_current(answer_for(q, levels, rng, noise))
    return session


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--type", default="INTJ", choices=[c.value for c in Category])
    ap.add_argument("--noise", type=float, default=0.0, help="probability of answering one step off")
    ap.add_argument("--seed", type=int, default=config.SEED)
    ap.add_argument("--out", default="reports")
    a = ap.parse_args()
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

    session = play(Category(a.type), noise=a.noise, seed=a.seed)
    report = session.finalize()
    res = report["result"]
    print(f"target={a.type} result={res['determined_type']} confidence={res['confidence']}% runner_up={res['second_best_type']}")
    os.makedirs(a.out, exist_ok=True)
    path = write_report(report, os.path.join(a.out, f"{_new_run_id()}_{a.type}.html"))
    print(f"Report: {path}")

if __name__ == "__main__":
    main()
