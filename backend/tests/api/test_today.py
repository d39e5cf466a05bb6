"""Tests for the Today Card and history endpoints."""


class TestTodayCard:
    def test_no_card_yet(self, client, couple):
        response = client.get(f"/today/{couple.couple_id}")

        assert response.status_code == 200
        assert response.json() == {"todayCard": None}

    def test_scenario_update_and_partner_reads(self, client, couple, alice):
        response = client.post(
            f"/today/{couple.couple_id}",
            json={"userId": alice.user_id, "mood": "😊", "intensity": "High"},
        )
        assert response.status_code == 200

        card = client.get(f"/today/{couple.couple_id}").json()["todayCard"]

        assert card["user1Mood"] == "😊"
        assert card["user1Intensity"] == "High"
        assert card["user2Mood"] is None
        assert card["user1MoodGallery"][0]["intensity"] == "High"
        assert card["updatedBy"] == alice.user_id

    def test_non_member_forbidden(self, client, couple, carol):
        response = client.post(
            f"/today/{couple.couple_id}",
            json={"userId": carol.user_id, "mood": "😊"},
        )
        assert response.status_code == 403

    def test_empty_update_is_400(self, client, couple, alice):
        response = client.post(f"/today/{couple.couple_id}", json={"userId": alice.user_id})

        assert response.status_code == 400
        assert response.json()["error"] == "MISSING_FIELDS"

    def test_notify_partner(self, client, couple, alice, bob):
        client.post(
            f"/today/{couple.couple_id}",
            json={"userId": alice.user_id, "message": "hello", "notifyPartner": True},
        )

        inbox = client.get(f"/notifications/{bob.user_id}").json()["notifications"]

        assert [n["type"] for n in inbox] == ["message-update"]
        assert inbox[0]["message"] == "hello"

    def test_no_notification_by_default(self, client, couple, alice, bob):
        client.post(f"/today/{couple.couple_id}", json={"userId": alice.user_id, "mood": "😊"})

        assert client.get(f"/notifications/{bob.user_id}").json() == {"notifications": []}

    def test_react(self, client, couple, alice, bob):
        client.post(f"/today/{couple.couple_id}", json={"userId": alice.user_id, "mood": "😊"})

        response = client.post(
            f"/today/{couple.couple_id}/react",
            json={"userId": bob.user_id, "emoji": "❤️"},
        )

        assert response.status_code == 200
        assert response.json()["todayCard"]["reactions"][0]["emoji"] == "❤️"

    def test_react_without_card(self, client, couple, bob):
        response = client.post(
            f"/today/{couple.couple_id}/react",
            json={"userId": bob.user_id, "emoji": "❤️"},
        )
        assert response.status_code == 404


class TestHistory:
    def test_history(self, client, couple, alice, clock):
        client.post(f"/today/{couple.couple_id}", json={"userId": alice.user_id, "mood": "😊"})
        clock.advance(days=1)
        client.post(f"/today/{couple.couple_id}", json={"userId": alice.user_id, "mood": "😢"})

        history = client.get(f"/history/{couple.couple_id}").json()["history"]

        assert [card["date"] for card in history] == ["2026-03-05", "2026-03-04"]
