from flask import Flask, request, g
from dotenv import load_dotenv
from app.config import get_config_class
from app.logging import configure_logging
from app.errors import errors_bp
from app.cli import register_cli
from app.api import register_api
from app.services.storage import ImageStorage
from app import metrics as menu_metrics
from flask_cors import CORS
from flasgger import Swagger
from prometheus_client import CollectorRegistry
from prometheus_flask_exporter import PrometheusMetrics
import logging
import os
import uuid
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator
from app.telemetry import init_tracing
from models import db


def _documented(rule) -> bool:
    return not rule.rule.startswith(("/__", "/metrics", "/flasgger", "/docs", "/apispec"))


def create_app(config_object=None, storage_client=None):
    """Application factory.

    ``storage_client`` replaces the boto3 S3 client, e.g. with a test double.
    """
    load_dotenv()
    app = Flask(__name__)

    if config_object is not None:
        app.config.from_object(config_object)
    else:
        app.config.from_object(get_config_class())

    configure_logging(app)
    register_cli(app)

    Swagger(
        app,
        config={
            "headers": [],
            "specs": [
                {
                    "endpoint": "apispec",
                    "route": "/apispec.json",
                    "rule_filter": _documented,
                    "model_filter": lambda tag: True,
                }
            ],
            "swagger_ui": True,
            "specs_route": "/docs/",
        },
        template={
            "info": {"title": "Menu management API", "version": "1.0.0"},
        },
    )
    # A private registry keeps repeated app creation (tests) from clashing
    registry = CollectorRegistry(auto_describe=True) if app.config.get("TESTING") else None
    metrics_kwargs = {"registry": registry} if registry is not None else {}
    metrics = PrometheusMetrics(app, path="/metrics", **metrics_kwargs)
    if not app.config.get("TESTING") and not os.environ.get("METRICS_APP_INFO_SET"):
        metrics.info("app_info", "Application info", version="1.0.0")
        os.environ["METRICS_APP_INFO_SET"] = "1"

    # Configure CORS
    allowed = app.config.get("CORS_ALLOWED_ORIGINS", "*")
    if isinstance(allowed, str):
        allowed = allowed.strip()
        origins = "*" if allowed == "*" else [o.strip() for o in allowed.split(",") if o.strip()]
    else:
        origins = allowed or "*"
    CORS(
        app,
        origins=origins,
        methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
    )

    app.register_blueprint(errors_bp)
    if app.config.get("TESTING"):
        from app.test_support import test_support_bp
        app.register_blueprint(test_support_bp)

    register_api(app)

    @app.before_request
    def _set_request_id():
        incoming = request.headers.get("X-Request-ID")
        rid = (incoming or uuid.uuid4().hex)[:100]
        g.request_id = rid
        app.logger.info(f"request start {request.method} {request.path}")

    @app.after_request
    def _add_request_id_header(resp):
        rid = getattr(g, "request_id", None)
        if rid:
            resp.headers["X-Request-ID"] = rid
        return resp

    @app.after_request
    def _set_security_headers(resp):
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        existing = resp.headers.get("Access-Control-Expose-Headers", "")
        if "X-Request-ID" not in existing:
            existing = (
                existing
                + ("," if existing and not existing.endswith(",") else "")
                + "X-Request-ID"
            ).strip(",")
        resp.headers["Access-Control-Expose-Headers"] = existing
        return resp

    db.init_app(app)
    with app.app_context():
        db.create_all()
        logging.info("Tables created")

    ImageStorage(app, client=storage_client)
    menu_metrics.init_app(app)

    if init_tracing(app):
        @app.after_request
        def _add_trace_header(resp):
            carrier = {}
            TraceContextTextMapPropagator().inject(carrier)
            tp = carrier.get("traceparent")
            if tp:
                resp.headers["traceparent"] = tp
            return resp

    @app.route("/health")
    def health():
        return {"status": "ok"}, 200

    return app
