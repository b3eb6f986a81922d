from botocore.exceptions import BotoCoreError, ClientError
from flask import Blueprint, request
from werkzeug.utils import secure_filename

from app.metrics import IMAGE_UPLOADS
from app.services.storage import get_storage
from app.utils import document, error, store_error_response

image_bp = Blueprint("images", __name__)


@image_bp.route("/upload-image", methods=["POST"])
def upload_image():
    """Store an image in the object store under its original filename."""
    image = request.files.get("image")
    if not image or not image.filename:
        return error("No image uploaded", status=400)
    name = secure_filename(image.filename)
    if not name:
        return error("Invalid file name", status=400)
    try:
        url = get_storage().put_image(name, image.stream, content_type=image.mimetype)
    except (BotoCoreError, ClientError) as e:
        return store_error_response("uploading image", e)
    IMAGE_UPLOADS.inc()
    return document({"message": "Image uploaded successfully", "imageUrl": url})


@image_bp.route("/images", methods=["GET"])
def list_images():
    try:
        urls = get_storage().list_urls()
    except (BotoCoreError, ClientError) as e:
        return store_error_response("listing images", e)
    return document(urls)
