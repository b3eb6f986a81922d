import contextlib
import os
import tempfile

from flask import Blueprint, current_app, request, send_file
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.utils import secure_filename

from app.schemas.menu import Scope
from app.services.menu_csv import MenuFileError, import_menu, read_menu_csv, write_menu_csv
from app.utils import document, error, store_error_response, validate_schema

menu_csv_bp = Blueprint("menu_csv", __name__)


def _temp_path(suffix: str) -> str:
    fd, path = tempfile.mkstemp(suffix=suffix, dir=current_app.config.get("UPLOAD_TMP_DIR"))
    os.close(fd)
    return path


def _remove(path: str) -> None:
    with contextlib.suppress(FileNotFoundError):
        os.remove(path)


@menu_csv_bp.route("/upload", methods=["POST"])
@validate_schema(Scope, source="form", message="MID and SID are required")
def upload_menu():
    """Replace the store's menu with the rows of an uploaded CSV."""
    scope = request.validated_data
    file = request.files.get("file")
    if not file or not file.filename:
        return error("No file uploaded", status=400)
    filename = secure_filename(file.filename)
    if filename.rsplit(".", 1)[-1].lower() != "csv":
        return error("Unsupported file type", status=400)

    path = _temp_path(".csv")
    try:
        file.save(path)
        try:
            rows = read_menu_csv(path)
        except MenuFileError as e:
            return error(str(e), status=400)
        try:
            summary = import_menu(rows, scope.mid, scope.sid)
        except SQLAlchemyError as e:
            return store_error_response("importing menu", e)
    finally:
        _remove(path)
    return document({"message": "Menu imported successfully", "imported": summary.to_dict()})


@menu_csv_bp.route("/download-csv", methods=["GET"])
@validate_schema(Scope, source="args", message="MID and SID are required")
def download_menu():
    """Export the store's menu as a CSV attachment."""
    scope = request.validated_data
    path = _temp_path(".csv")
    try:
        count = write_menu_csv(scope.mid, scope.sid, path)
    except SQLAlchemyError as e:
        _remove(path)
        return store_error_response("exporting menu", e)
    current_app.logger.info("menu export: %d rows", count)
    response = send_file(path, mimetype="text/csv", as_attachment=True, download_name="menu.csv")
    response.call_on_close(lambda: _remove(path))
    return response
