from __future__ import annotations

import pytest

import autoplay
from type_core.types import Category, Dimension, Question, SessionState


@pytest.mark.parametrize("cat", list(Category))
def test_consistent_respondent_is_classified_as_their_type(cat):
    session = autoplay.play(cat, seed=0)
    assert session.state is SessionState.COMPLETE
    assert session.answered_count == len(session.questions)
    res = session.classify()
    assert res.top_category is cat


def test_reversed_items_are_answered_inverted():
    levels = autoplay.target_agreement(Category.INTJ)
    assert levels[Dimension.Ni] == 5 and levels[Dimension.Se] == 2 and levels[Dimension.Ne] == 2
    fwd = Question(id="x", text="", dimension=Dimension.Ni)
    rev = Question(id="y", text="", dimension=Dimension.Ni, is_reversed=True)
    assert autoplay.answer_for(fwd, levels) == 5
    assert autoplay.answer_for(rev, levels) == 1
    assert autoplay.answer_for(Question(id="z", text="", dimension="Qq"), levels) == 3


def test_noisy_play_stays_on_scale():
    session = autoplay.play(Category.ENFP, noise=0.5, seed=7)
    assert all(1 <= a.value <= 5 for a in session.answers.values())
