import random

import pytest

from moodjournal.main import app
from moodjournal.services.chatbot_service import get_rng, pick_tip
from moodjournal.utils.support_messages import (
    MENTAL_HEALTH_TIPS,
    MOOD_INSIGHTS,
    NEGATIVE_PATTERN_MESSAGE,
)


class FirstChoiceRng:
    def choice(self, seq):
        return seq[0]


def test_positive_reply(client, auth_headers):
    response = client.post("/api/chatbot", json={"journalText": "I am happy and joyful"}, headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["moodScore"] == 1
    assert body["moodCategory"] == "positive"
    assert body["suggestion"] in MENTAL_HEALTH_TIPS["positive"]
    assert body["insight"] == MOOD_INSIGHTS["positive"]
    assert body["patternAlert"] is None


@pytest.mark.parametrize("text, score, category", [
    ("I am sad and hopeless", -1, "negative"),
    ("I went to the store", 0, "neutral"),
])
def test_reply_category_matches_score(client, auth_headers, text, score, category):
    body = client.post("/api/chatbot", json={"journalText": text}, headers=auth_headers).json()
    assert body["moodScore"] == score
    assert body["moodCategory"] == category
    assert body["suggestion"] in MENTAL_HEALTH_TIPS[category]
    assert body["insight"] == MOOD_INSIGHTS[category]


def test_tip_selection_uses_injected_rng(client, auth_headers):
    app.dependency_overrides[get_rng] = FirstChoiceRng

    body = client.post("/api/chatbot", json={"journalText": "I am sad and hopeless"}, headers=auth_headers).json()
    assert body["suggestion"] == MENTAL_HEALTH_TIPS["negative"][0]


def test_negative_streak_adds_pattern_alert(client, auth_headers):
    for _ in range(3):
        response = client.post("/api/journal", json={"content": "I feel sad and hopeless"}, headers=auth_headers)
        assert response.status_code == 201

    body = client.post("/api/chatbot", json={"journalText": "I went to the store"}, headers=auth_headers).json()
    assert body["patternAlert"] == NEGATIVE_PATTERN_MESSAGE


def test_streak_of_another_user_is_not_reported(client, auth_headers, other_auth_headers):
    for _ in range(3):
        client.post("/api/journal", json={"content": "I feel sad and hopeless"}, headers=other_auth_headers)

    body = client.post("/api/chatbot", json={"journalText": "I went to the store"}, headers=auth_headers).json()
    assert body["patternAlert"] is None


def test_chatbot_does_not_save_entries(client, auth_headers):
    client.post("/api/chatbot", json={"journalText": "I am happy and joyful"}, headers=auth_headers)
    listing = client.get("/api/journal", headers=auth_headers).json()
    assert listing["pagination"]["totalEntries"] == 0


def test_chatbot_validates_text(client, auth_headers):
    response = client.post("/api/chatbot", json={"journalText": "short"}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "journalText"

    assert client.post("/api/chatbot", json={}, headers=auth_headers).status_code == 400


def test_chatbot_requires_authentication(client):
    assert client.post("/api/chatbot", json={"journalText": "I am happy and joyful"}).status_code == 401


def test_tips_default_category(client, auth_headers):
    response = client.get("/api/chatbot/tips", headers=auth_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["category"] == "neutral"
    assert body["tip"] in MENTAL_HEALTH_TIPS["neutral"]


@pytest.mark.parametrize("category", ["negative", "neutral", "positive"])
def test_tips_for_each_category(client, auth_headers, category):
    body = client.get("/api/chatbot/tips", params={"category": category}, headers=auth_headers).json()
    assert body == {"tip": body["tip"], "category": category}
    assert body["tip"] in MENTAL_HEALTH_TIPS[category]


def test_tips_unknown_category(client, auth_headers):
    response = client.get("/api/chatbot/tips", params={"category": "ecstatic"}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid category"


def test_canned_tables_are_read_only():
    for category in ("negative", "neutral", "positive"):
        assert len(MENTAL_HEALTH_TIPS[category]) == 10
    with pytest.raises(TypeError):
        MENTAL_HEALTH_TIPS["angry"] = ("shout",)


def test_pick_tip_with_seeded_rng():
    tip = pick_tip("positive", random.Random(7))
    assert tip in MENTAL_HEALTH_TIPS["positive"]
    assert tip == pick_tip("positive", random.Random(7))
