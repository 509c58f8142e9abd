from datetime import datetime, timedelta, timezone


def _seed(chat_store, count):
    start = datetime(1999, 12, 31, tzinfo=timezone.utc)
    for i in range(count):
        ts = start + timedelta(minutes=i)
        chat_store.messages.append({
            "_id": f"seed{i}",
            "username": f"Anonymous{i + 1}",
            "text": f"message {i + 1}",
            "timestamp": ts,
            "createdAt": ts,
        })


def test_get_messages_sorted_oldest_first(client, chat_store):
    _seed(chat_store, 3)
    chat_store.messages.reverse()

    messages = client.get("/api/90s/chat").json()["messages"]

    assert [m["text"] for m in messages] == ["message 1", "message 2", "message 3"]


def test_post_message_assigns_running_username(client, chat_store):
    _seed(chat_store, 5)

    response = client.post("/api/90s/chat", json={"message": "  hello  "})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Message sent successfully"
    assert body["newMessage"]["username"] == "Anonymous6"
    assert body["newMessage"]["text"] == "hello"
    assert body["newMessage"]["_id"]
    assert len(body["allMessages"]) == 6
    assert body["allMessages"][-1]["text"] == "hello"


def test_whitespace_message_rejected(client, chat_store):
    _seed(chat_store, 2)

    response = client.post("/api/90s/chat", json={"message": "   \n\t "})

    assert response.status_code == 400
    assert response.json() == {"error": "Message cannot be empty"}
    assert len(chat_store.messages) == 2


def test_missing_message_rejected(client, chat_store):
    response = client.post("/api/90s/chat", json={})

    assert response.status_code == 400
    assert chat_store.messages == []


def test_chat_disabled_without_database(offline_client):
    get_response = offline_client.get("/api/90s/chat")
    post_response = offline_client.post("/api/90s/chat", json={"message": "hi"})

    assert get_response.status_code == 503
    assert "disabled" in get_response.json()["error"]
    assert post_response.status_code == 503


def test_database_failure_becomes_500(client, datastore, broken_store):
    datastore.chat = broken_store

    assert client.get("/api/90s/chat").json() == {"error": "Failed to fetch chat messages"}
    response = client.post("/api/90s/chat", json={"message": "hi"})
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to send message"}
