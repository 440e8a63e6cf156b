from __future__ import annotations
import json, logging
import importlib.resources as ir
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .errors import QuestionBankError
from .schemas import QuestionRecord
from .types import Dimension, Question

log = logging.getLogger(__name__)

DIMENSIONS: List[Dimension] = list(Dimension)
BANK_PATH = ir.files(__package__).joinpath("data/questions.json")


def _to_question(rec: QuestionRecord) -> Question:
    dim = Dimension.parse(rec.dimension)
    if dim is None:
        log.warning("question %s names unknown function %r; it will score 0", rec.id, rec.dimension)
    return Question(id=rec.id, text=rec.text, dimension=dim or rec.dimension, is_reversed=rec.is_reversed)


def load_bank(path: Optional[Path] = None) -> List[Question]:
    p = Path(path) if path is not None else BANK_PATH
    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
        records = [QuestionRecord.model_validate(r) for r in raw]
    except (OSError, ValueError, ValidationError) as exc:
        raise QuestionBankError(f"cannot load question bank from {p}", detail=str(exc)) from exc
    seen: set[str] = set()
    for rec in records:
        if rec.id in seen:
            raise QuestionBankError(f"duplicate question id {rec.id!r} in {p}")
        seen.add(rec.id)
    return [_to_question(r) for r in records]
