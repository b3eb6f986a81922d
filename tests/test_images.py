import io


def upload_image(client, name="paneer.png", content=b"\x89PNG-data"):
    return client.post(
        "/upload-image",
        data={"image": (io.BytesIO(content), name)},
        content_type="multipart/form-data",
    )


def test_upload_image_creates_bucket_and_stores_object(client, app, s3):
    resp = upload_image(client)
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["imageUrl"].endswith("/images/paneer.png")
    assert s3.buckets["images"]["paneer.png"] == b"\x89PNG-data"


def test_same_filename_overwrites(client, app, s3):
    upload_image(client, content=b"first")
    upload_image(client, content=b"second")
    assert s3.buckets["images"] == {"paneer.png": b"second"}


def test_list_images(client, app, s3):
    upload_image(client, "b.png")
    upload_image(client, "a.jpg")
    resp = client.get("/images")
    assert resp.status_code == 200
    urls = resp.get_json()
    assert [u.rsplit("/", 1)[-1] for u in urls] == ["a.jpg", "b.png"]
    base = app.config["IMAGE_PUBLIC_BASE_URL"].rstrip("/")
    assert urls[0] == f"{base}/images/a.jpg"


def test_upload_image_requires_file(client, app, s3):
    resp = client.post("/upload-image", data={}, content_type="multipart/form-data")
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "No image uploaded"


def test_object_store_errors_are_reported(client, app, s3):
    s3.fail_with = "connection refused"
    resp = upload_image(client)
    assert resp.status_code == 500
    assert "connection refused" in resp.get_json()["message"]
    assert client.get("/images").status_code == 500
