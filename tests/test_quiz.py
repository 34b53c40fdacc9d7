import pytest

from scrolloff_api.core.config import settings
from scrolloff_api.features.quiz.services import (
    IncompleteQuizError,
    classify,
    load_quiz,
    risk_to_tip_level,
    score_answers,
)

QUIZ = load_quiz(settings.QUIZ_QUESTIONS_PATH)


def answers_with(healthy: int):
    """`healthy` réponses de score 0, les autres de score 3."""
    answers = {}
    for i, question in enumerate(QUIZ.questions):
        scores = [o.score for o in question.options]
        answers[question.id] = scores.index(0) if i < healthy else scores.index(3)
    return answers


@pytest.mark.parametrize(
    "score, expected",
    [(10, "low"), (7, "low"), (6, "medium"), (4, "medium"), (3, "high"), (0, "high")],
)
def test_classify(score, expected):
    assert classify(score) == expected


def test_risk_to_tip_level():
    assert risk_to_tip_level("Low Risk") == "low"
    assert risk_to_tip_level(" medium risk ") == "medium"
    assert risk_to_tip_level("High Risk") == "high"


def test_score_counts_options_scored_zero_or_one():
    answers = answers_with(0)
    first = QUIZ.questions[0]
    answers[first.id] = [o.score for o in first.options].index(1)
    assert score_answers(QUIZ.questions, answers) == 1


def test_score_requires_every_question():
    answers = answers_with(10)
    answers.pop(QUIZ.questions[-1].id)
    with pytest.raises(IncompleteQuizError):
        score_answers(QUIZ.questions, answers)


def test_get_quiz(client):
    body = client.get("/api/quiz").json()
    assert len(body["questions"]) == 10
    assert "results" not in body


@pytest.mark.parametrize(
    "healthy, category, tip_level",
    [(8, "Low Risk", "low"), (5, "Medium Risk", "medium"), (2, "High Risk", "high")],
)
def test_score_endpoint(client, healthy, category, tip_level):
    r = client.post("/api/quiz/score", json={"answers": answers_with(healthy)})
    assert r.status_code == 200
    body = r.json()
    assert body["score"] == healthy
    assert body["total"] == 10
    assert body["category"] == category
    assert body["tip_level"] == tip_level


def test_score_endpoint_incomplete(client):
    answers = answers_with(5)
    answers.pop(QUIZ.questions[0].id)
    r = client.post("/api/quiz/score", json={"answers": answers})
    assert r.status_code == 400


def test_score_endpoint_invalid_option(client):
    answers = answers_with(5)
    answers[QUIZ.questions[0].id] = 9
    assert client.post("/api/quiz/score", json={"answers": answers}).status_code == 400


def test_score_endpoint_saves_result(client, admin_headers):
    client.post("/api/quiz/score", json={"answers": answers_with(8), "save": True})
    results = client.get("/api/admin/results", headers=admin_headers).json()
    assert [(r["score"], r["niveau"]) for r in results] == [(8, "Low Risk")]
