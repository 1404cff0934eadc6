import mimetypes
import re
import threading
import uuid

import boto3
from botocore.config import Config
from flask import current_app

from impact_api.errors import BadRequest, ServerMisconfiguration
from impact_api.utils.time import utcnow

DEFAULT_FOLDER = "media"
DEFAULT_EXTENSION = "bin"

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9/_.\-]")
_UNSAFE_EXT_CHARS = re.compile(r"[^a-z0-9]")

# mimetypes has no stable answer for these.
_PREFERRED_EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/svg+xml": "svg",
    "video/quicktime": "mov",
    "audio/mpeg": "mp3",
}

_client_lock = threading.Lock()


def sanitize_key(raw):
    """
    Strip characters outside [A-Za-z0-9/_.-] and refuse anything that could
    escape the bucket prefix: empty keys, absolute keys, '..' segments.
    """
    key = _UNSAFE_KEY_CHARS.sub("", raw or "")
    if not key:
        raise BadRequest("Invalid upload key")
    if key.startswith("/"):
        raise BadRequest("Invalid upload key")
    if any(segment in ("", ".", "..") for segment in key.split("/")):
        raise BadRequest("Invalid upload key")
    return key


def sanitize_extension(raw):
    ext = _UNSAFE_EXT_CHARS.sub("", (raw or "").lower().lstrip("."))
    return ext or None


def infer_extension(content_type):
    content_type = (content_type or "").split(";", 1)[0].strip().lower()
    if content_type in _PREFERRED_EXTENSIONS:
        return _PREFERRED_EXTENSIONS[content_type]
    guessed = mimetypes.guess_extension(content_type) if content_type else None
    return guessed.lstrip(".") if guessed else None


def build_key(content_type, extension=None, folder=None):
    folder = sanitize_key(folder.strip("/")) if folder else DEFAULT_FOLDER
    ext = sanitize_extension(extension) or infer_extension(content_type) or DEFAULT_EXTENSION
    date = utcnow().strftime("%Y-%m-%d")
    return f"{folder}/{date}/{uuid.uuid4().hex}.{ext}"


def public_url_for(key):
    cdn = (current_app.config.get("CDN_BASE_URL") or "").rstrip("/")
    if cdn:
        return f"{cdn}/{key}"
    bucket = current_app.config["S3_BUCKET"]
    region = current_app.config.get("AWS_REGION") or "us-east-1"
    return f"https://{bucket}.s3.{region}.amazonaws.com/{key}"


def get_s3_client():
    """
    One S3 client per app, created on first use.
    """
    app = current_app._get_current_object()
    client = app.extensions.get("s3_client")
    if client is not None:
        return client

    with _client_lock:
        client = app.extensions.get("s3_client")
        if client is None:
            client = boto3.client(
                "s3",
                region_name=app.config.get("AWS_REGION"),
                aws_access_key_id=app.config.get("AWS_ACCESS_KEY_ID"),
                aws_secret_access_key=app.config.get("AWS_SECRET_ACCESS_KEY"),
                config=Config(signature_version="s3v4"),
            )
            app.extensions["s3_client"] = client
    return client


def presign_put(key, content_type):
    bucket = current_app.config.get("S3_BUCKET")
    if not bucket:
        raise ServerMisconfiguration("Server misconfigured: S3_BUCKET not set")

    expires = current_app.config.get("UPLOAD_URL_EXPIRES", 60)
    url = get_s3_client().generate_presigned_url(
        "put_object",
        Params={"Bucket": bucket, "Key": key, "ContentType": content_type},
        ExpiresIn=expires,
    )
    return url, expires
