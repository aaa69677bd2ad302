import os
from io import BytesIO

from ayora.services.image_analysis_service import MOCK_ANALYSIS, analyze_food_image


def upload_image(client, headers, filename="lunch.jpg", content=b"fake-image", **form):
    data = {"image": (BytesIO(content), filename), **form}
    return client.post("/api/images/upload", headers=headers, data=data, content_type="multipart/form-data")


def upload_audio(client, headers, path="/api/voice/upload", filename="note.wav", **form):
    data = {"audio": (BytesIO(b"RIFF-fake-audio"), filename), **form}
    return client.post(path, headers=headers, data=data, content_type="multipart/form-data")


def test_image_upload_returns_mock_analysis(client, app, patient_headers):
    r = upload_image(client, patient_headers)
    assert r.status_code == 201, r.data
    data = r.get_json()
    assert data["filename"].startswith("food-") and data["filename"].endswith(".jpg")
    assert data["original_name"] == "lunch.jpg"
    assert data["url"] == f"/api/images/{data['filename']}"
    assert data["size"] == len(b"fake-image")
    assert data["analysis"]["identified_foods"][0]["name"] == "Grilled Chicken Salad"
    assert data["analysis"]["nutrition"]["calories"] == 320
    assert os.path.isfile(os.path.join(app.config["UPLOAD_FOLDER"], data["filename"]))


def test_image_upload_with_food_name_uses_lookup(client, patient_headers):
    r = upload_image(client, patient_headers, food_name="Banana smoothie")
    assert r.status_code == 201, r.data
    analysis = r.get_json()["analysis"]
    assert analysis["identified_foods"][0]["name"] == "Banana smoothie"
    assert analysis["nutrition"]["calories"] == 89
    assert analysis["ayurvedic_tag"] == "sweet"


def test_image_upload_rejects_missing_and_wrong_type(client, patient_headers):
    r = client.post("/api/images/upload", headers=patient_headers, data={}, content_type="multipart/form-data")
    assert r.status_code == 400
    assert r.get_json()["error"]["code"] == "IMAGE_REQUIRED"

    r = upload_image(client, patient_headers, filename="notes.txt")
    assert r.status_code == 400
    assert r.get_json()["error"]["code"] == "INVALID_FILE_TYPE"


def test_image_upload_size_limit(client, app, patient_headers):
    app.config["MAX_IMAGE_BYTES"] = 5
    r = upload_image(client, patient_headers)
    assert r.status_code == 413
    assert r.get_json()["error"]["code"] == "FILE_TOO_LARGE"


def test_request_body_limit(client, app, patient_headers):
    app.config["MAX_CONTENT_LENGTH"] = 64
    r = upload_image(client, patient_headers, content=b"x" * 1024)
    assert r.status_code == 413
    assert r.get_json()["error"]["code"] == "FILE_TOO_LARGE"


def test_image_get_and_delete(client, patient_headers):
    filename = upload_image(client, patient_headers).get_json()["filename"]

    r = client.get(f"/api/images/{filename}", headers=patient_headers)
    assert r.status_code == 200
    assert r.data == b"fake-image"
    r.close()

    r = client.delete(f"/api/images/{filename}", headers=patient_headers)
    assert r.status_code == 200

    assert client.get(f"/api/images/{filename}", headers=patient_headers).status_code == 404
    assert client.delete(f"/api/images/{filename}", headers=patient_headers).status_code == 404


def test_uploads_require_auth(client):
    r = client.post("/api/images/upload", data={"image": (BytesIO(b"x"), "a.jpg")},
                    content_type="multipart/form-data")
    assert r.status_code == 401


def test_voice_upload_with_text(client, app, patient_headers):
    r = upload_audio(client, patient_headers, text="I had two eggs and rice for breakfast")
    assert r.status_code == 201, r.data
    data = r.get_json()
    assert data["filename"].startswith("voice-")
    assert data["url"] == f"/api/voice/{data['filename']}"
    assert data["transcription"] == "I had two eggs and rice for breakfast"

    analysis = data["analysis"]
    assert analysis["meal_type"] == "breakfast"
    assert analysis["extracted_meals"] == [
        {"name": "Rice", "quantity": 1, "unit": "serving"},
        {"name": "Egg", "quantity": 2, "unit": "serving"},
    ]
    assert analysis["nutrition"]["calories"] == 440
    assert analysis["confidence"] == 0.8
    assert os.path.isfile(os.path.join(app.config["UPLOAD_FOLDER"], "audio", data["filename"]))


def test_voice_process_alias_uses_mock_transcription(client, patient_headers):
    r = upload_audio(client, patient_headers, path="/api/voice/process", filename="note.m4a")
    assert r.status_code == 201, r.data
    data = r.get_json()
    assert data["transcription"]
    assert data["analysis"]["confidence"] in (0.8, 0.3)


def test_voice_upload_rejects_non_audio(client, patient_headers):
    r = upload_audio(client, patient_headers, filename="photo.png")
    assert r.status_code == 400
    assert r.get_json()["error"]["code"] == "INVALID_FILE_TYPE"

    r = client.post("/api/voice/upload", headers=patient_headers, data={}, content_type="multipart/form-data")
    assert r.status_code == 400
    assert r.get_json()["error"]["code"] == "AUDIO_REQUIRED"


def test_voice_get_and_delete(client, patient_headers):
    filename = upload_audio(client, patient_headers, text="rice").get_json()["filename"]

    r = client.get(f"/api/voice/{filename}", headers=patient_headers)
    assert r.status_code == 200
    assert r.data == b"RIFF-fake-audio"
    r.close()

    assert client.delete(f"/api/voice/{filename}", headers=patient_headers).status_code == 200
    assert client.get(f"/api/voice/{filename}", headers=patient_headers).status_code == 404


def test_returned_urls_serve_the_stored_files(client, patient_headers):
    image = upload_image(client, patient_headers).get_json()
    r = client.get(image["url"], headers=patient_headers)
    assert r.status_code == 200
    assert r.data == b"fake-image"
    r.close()

    audio = upload_audio(client, patient_headers, text="rice").get_json()
    r = client.get(audio["url"], headers=patient_headers)
    assert r.status_code == 200
    assert r.data == b"RIFF-fake-audio"
    r.close()


def test_meal_image_url_resolves(client, patient_headers):
    image = upload_image(client, patient_headers).get_json()
    r = client.post("/api/meals", headers=patient_headers, json={
        "food_name": "Salad", "quantity": 1, "image_data": {
            "filename": image["filename"], "url": image["url"], "size": image["size"],
        },
    })
    assert r.status_code == 201, r.data

    recent = client.get("/api/meals/recent", headers=patient_headers).get_json()
    r = client.get(recent[0]["image_url"], headers=patient_headers)
    assert r.status_code == 200
    r.close()


def test_mock_image_analysis_is_not_shared_between_calls():
    first = analyze_food_image("/tmp/a.jpg")
    first["ayurvedic_properties"]["dosha_effect"]["vata"] = "increase"
    first["identified_foods"][0]["name"] = "Changed"

    assert MOCK_ANALYSIS["ayurvedic_properties"]["dosha_effect"]["vata"] == "decrease"
    second = analyze_food_image("/tmp/b.jpg")
    assert second["ayurvedic_properties"]["dosha_effect"]["vata"] == "decrease"
    assert second["identified_foods"][0]["name"] == "Grilled Chicken Salad"
