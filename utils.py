import base64
import uuid
from datetime import datetime
from dateutil import tz


def get_local_now(zone: str = "Europe/London"):
    return datetime.now(tz=tz.gettz(zone))


def new_id() -> str:
    return uuid.uuid4().hex


def to_data_url(data: bytes, mime: str | None = None) -> str:
    mime = mime or "image/jpeg"
    return f"data:{mime};base64,{base64.b64encode(data).decode('ascii')}"


def split_data_url(image: str):
    """Returns (mime_type, base64_data) for a data URL or bare base64 string."""
    if image.startswith("data:") and "," in image:
        header, data = image.split(",", 1)
        mime = header[5:].split(";", 1)[0] or "image/jpeg"
        return mime, data
    return "image/jpeg", image


def image_source(ref: str):
    """What st.image should get for a stored image reference: bytes for data URLs, else the URL."""
    if ref and ref.startswith("data:"):
        return base64.b64decode(split_data_url(ref)[1])
    return ref
