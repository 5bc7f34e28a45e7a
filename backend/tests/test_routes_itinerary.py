def test_itinerary_is_public(client, completion_client):
    response = client.post("/api/itinerary", json={"destination": "Paris", "days": 3, "interest": "food"})

    assert response.status_code == 200
    assert response.json()["itinerary"].startswith("Day 1")

    prompt = completion_client.chat.completions.create.call_args.kwargs["messages"][0]["content"]
    assert "Paris" in prompt and "3" in prompt and "food" in prompt


def test_generation_failure_is_generic_500(client, completion_client):
    completion_client.chat.completions.create.side_effect = RuntimeError("quota exceeded")

    response = client.post("/api/itinerary", json={"destination": "Paris", "days": 3, "interest": "food"})

    assert response.status_code == 500
    assert response.json() == {"error": "AI generation failed"}


def test_missing_fields_are_rejected_before_generation(client, completion_client):
    response = client.post("/api/itinerary", json={"destination": "Paris"})

    assert response.status_code == 400
    completion_client.chat.completions.create.assert_not_called()
