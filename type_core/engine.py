# type_core/engine.py
from __future__ import annotations
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence
import logging, random, threading

from .types import Answer, AnswerEvent, ClassificationResult, Dimension, Question, ScoreVector, SessionState, empty_scores
from .question_bank import load_bank
from .scoring import check_likert, score_item
from .sequencer import shuffle_questions
from .classifier import DEFAULT_CLASSIFIER, TypeClassifier
from .normalizer import normalize
from .errors import SessionStateError
from .reporting import build_report
from . import config


log = logging.getLogger(__name__)


def _emit_trace(**values: object) -> None:
    if not config.DEBUG_TRACE:
        return
    ordered = []
    for key in config.TRACE_FIELDS:
        if key in values:
            ordered.append(f"{key}={values[key]}")
    if ordered:
        log.info("trace %s", " ".join(ordered))


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _cfg_int(cfg: dict, name: str, default: int) -> int:
    raw = cfg.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except (TypeError, ValueError):
        log.warning("config %s=%r is not an integer; using %d", name, raw, default)
        return default


class QuizSession:
    """One respondent's pass through the question bank.

    Owns the shuffled question order, the answers given so far and the raw
    per-function score vector.  Mutations are serialised by a per-session
    lock and gated by ``SessionState``: answers are accepted only while
    ``AWAITING_ANSWER``, after which the caller must ``advance()``.
    """

    def __init__(
        self,
        questions: Optional[Sequence[Question]] = None,
        *,
        rng: Optional[random.Random] = None,
        classifier: Optional[TypeClassifier] = None,
        min_provisional: Optional[int] = None,
        cfg: Optional[dict] = None,
    ):
        self.cfg = config.load_config() if cfg is None else cfg
        self.rng = rng or config.make_rng(self.cfg)
        self.bank: List[Question] = list(questions) if questions is not None else load_bank()
        self.classifier = classifier or DEFAULT_CLASSIFIER
        if min_provisional is None:
            min_provisional = _cfg_int(self.cfg, "PROVISIONAL_MIN_ANSWERS", config.PROVISIONAL_MIN_ANSWERS)
        self.min_provisional = min_provisional
        self._lock = threading.Lock()
        self._id_to_question: Dict[str, Question] = {q.id: q for q in self.bank}
        self._start_fresh()

    def _start_fresh(self) -> None:
        self.questions: List[Question] = shuffle_questions(self.bank, self.rng)
        self.answers: Dict[str, Answer] = {}
        self.scores: ScoreVector = empty_scores()
        self.position = 0
        self.state = SessionState.AWAITING_ANSWER if self.questions else SessionState.COMPLETE
        self.answer_events: List[AnswerEvent] = []
        self._recorded_id: Optional[str] = None

    # ---- answering ----
    def _require(self, *allowed: SessionState) -> None:
        if self.state not in allowed:
            raise SessionStateError(
                f"session is {self.state.value}; expected {', '.join(s.value for s in allowed)}",
                detail={"state": self.state.value},
            )

    def _apply(self, question: Question, value: int) -> AnswerEvent:
        dim = Dimension.parse(question.dimension)
        old = self.answers.get(question.id)
        delta = 0.0
        if dim is None:
            log.warning("question %s has unknown function %r; answer kept, no score change", question.id, question.dimension)
        else:
            if old is not None:
                delta -= score_item(old.value, old.is_reversed)
            delta += score_item(value, question.is_reversed)
            self.scores[dim] += delta
        self.answers[question.id] = Answer(question_id=question.id, value=value, is_reversed=question.is_reversed)
        event = AnswerEvent(
            t=_now_iso(),
            question_id=question.id,
            dimension=dim.value if dim is not None else str(question.dimension),
            value=value,
            is_reversed=question.is_reversed,
            previous_value=old.value if old is not None else None,
            delta=delta,
            score_after=self.scores[dim] if dim is not None else 0.0,
        )
        self.answer_events.append(event)
        _emit_trace(**vars(event))
        return event

    def record_answer(self, question: Question, value: object) -> AnswerEvent:
        """Record or revise the answer to ``question`` and update its function score.

        A revision first removes the stored answer's contribution, so
        answering the same question twice with the same value leaves the
        scores unchanged.  Invalid values raise ``InvalidLikertValue`` before
        anything is touched.
        """
        v = check_likert(value)
        with self._lock:
            self._require(SessionState.AWAITING_ANSWER)
            event = self._apply(question, v)
            self._recorded_id = question.id
            self.state = SessionState.TRANSITIONING
            return event

    def answer_current(self, value: object) -> AnswerEvent:
        v = check_likert(value)
        with self._lock:
            self._require(SessionState.AWAITING_ANSWER)
            event = self._apply(self.questions[self.position], v)
            self._recorded_id = self.questions[self.position].id
            self.state = SessionState.TRANSITIONING
            self._advance_locked()
            return event

    def advance(self) -> Optional[Question]:
        with self._lock:
            self._require(SessionState.TRANSITIONING)
            return self._advance_locked()

    def _advance_locked(self) -> Optional[Question]:
        recorded, self._recorded_id = self._recorded_id, None
        if recorded is not None and recorded != self.questions[self.position].id:
            # revision of another question; the pending one is still unanswered
            self.state = SessionState.AWAITING_ANSWER
            return self.questions[self.position]
        if self.position < len(self.questions) - 1:
            self.position += 1
            self.state = SessionState.AWAITING_ANSWER
            return self.questions[self.position]
        self.state = SessionState.COMPLETE
        return None

    def go_back(self) -> Question:
        with self._lock:
            self._require(SessionState.AWAITING_ANSWER)
            if self.position == 0:
                raise SessionStateError("already at the first question")
            self.position -= 1
            return self.questions[self.position]

    def reset(self) -> None:
        with self._lock:
            self._start_fresh()

    # ---- read side ----
    def current_question(self) -> Optional[Question]:
        if self.state is SessionState.COMPLETE:
            return None
        return self.questions[self.position]

    def question(self, question_id: str) -> Optional[Question]:
        return self._id_to_question.get(question_id)

    def answer_for(self, question_id: str) -> Optional[int]:
        a = self.answers.get(question_id)
        return a.value if a is not None else None

    @property
    def answered_count(self) -> int:
        return len(self.answers)

    @property
    def progress(self) -> float:
        total = len(self.questions)
        return self.answered_count / total if total else 1.0

    def current_scores(self) -> ScoreVector:
        return dict(self.scores)

    def normalized_scores(self) -> Dict[Dimension, int]:
        return {d: normalize(v) for d, v in self.scores.items()}

    def classify(self) -> ClassificationResult:
        return self.classifier.classify(self.scores)

    def provisional(self) -> Optional[ClassificationResult]:
        if self.answered_count < self.min_provisional:
            return None
        return self.classify()

    def finalize(self) -> Dict[str, object]:
        self._require(SessionState.COMPLETE)
        meta = {"total_items": len(self.questions), "answered": self.answered_count}
        return build_report(self.current_scores(), classifier=self.classifier, meta=meta, events=self.answer_events)
