# client/resources.py
"""Admin-managed resource kinds and their form-boundary conversions."""

import copy
import json
import logging
from dataclasses import dataclass
from typing import Callable, Optional

logger = logging.getLogger(__name__)

PRODUCT_FORM = {
    "id": None,
    "name": "",
    "tagline": "",
    "description": "",
    "price": "",
    "category": "",
    "main_image_url": "",
    "image_urls": [],
    "video_url": "",
    "features_text": "",
    "tco_savings_text": "",
    "tco_savings_image_url": "",
    "specifications": {},
    "related_products_ids": [],
}
QNA_FORM = {"id": None, "question": "", "answer": ""}
AWARD_FORM = {"id": None, "image_url": ""}
MEDIA_FORM = {"id": None, "url": ""}


def _compact_json(value):
    return json.dumps(value, separators=(",", ":"))


def verbatim(form):
    return dict(form)


# ---------------- Product conversions ----------------

def encode_product(form):
    """Product payload for the wire: list and mapping fields become JSON strings."""
    payload = dict(form)
    for field in ("image_urls", "related_products_ids"):
        value = payload.get(field)
        payload[field] = _compact_json(value) if isinstance(value, list) else "[]"
    specs = payload.get("specifications")
    if specs is not None and not isinstance(specs, dict):
        logger.warning("Product %s: specifications is not a JSON object, sending {}", payload.get("id"))
    payload["specifications"] = _compact_json(specs) if isinstance(specs, dict) else "{}"
    return payload


def decode_product(row):
    """Edit buffer seeded from a fetched product row."""
    form = dict(row)
    for field in ("image_urls", "related_products_ids"):
        if not isinstance(form.get(field), list):
            form[field] = []
    if not isinstance(form.get("specifications"), dict):
        form["specifications"] = {}
    return form


def parse_url_list(text):
    """'a, b' -> ['a', 'b'] (order kept)."""
    if not text or not text.strip():
        return []
    return [url.strip() for url in text.split(",")]


def parse_id_list(text):
    """'1, x, 3' -> [1, 3]; anything that is not an integer is dropped."""
    ids = []
    for part in (text or "").split(","):
        try:
            ids.append(int(part.strip()))
        except ValueError:
            continue
    return ids


def parse_specifications(text):
    """Parsed JSON, {} for blank text, or the raw text when it is not valid JSON."""
    if not text or not text.strip():
        return {}
    try:
        return json.loads(text)
    except ValueError:
        logger.debug("Invalid JSON for specifications, keeping raw text")
        return text


def join_list(values):
    if isinstance(values, list):
        return ", ".join(str(v) for v in values)
    return values or ""


def specifications_text(value):
    if isinstance(value, (dict, list)):
        return json.dumps(value, indent=2)
    return value or ""


# ---------------- Resource registry ----------------

@dataclass(frozen=True)
class Resource:
    key: str
    endpoint: str
    label: str
    form_template: Optional[dict] = None
    encode: Callable[[dict], dict] = verbatim
    decode: Callable[[dict], dict] = verbatim

    @property
    def editable(self):
        return self.form_template is not None

    def empty_form(self):
        if self.form_template is None:
            raise ValueError(f"{self.key} has no form")
        return copy.deepcopy(self.form_template)


PRODUCTS = Resource("products", "products", "Products", PRODUCT_FORM,
                    encode=encode_product, decode=decode_product)
QNA = Resource("qna", "qna", "Q&A", QNA_FORM)
AWARDS = Resource("awards", "awards", "Awards", AWARD_FORM)
MEDIA = Resource("media", "media", "Media", MEDIA_FORM)
REQUESTS = Resource("requests", "requests", "Requests")
APPLICATIONS = Resource("applications", "apply", "Applications")

RESOURCES = {r.key: r for r in (PRODUCTS, QNA, AWARDS, MEDIA, REQUESTS, APPLICATIONS)}


def get_resource(key):
    try:
        return RESOURCES[key]
    except KeyError:
        raise KeyError(f"Unknown resource: {key}") from None


def resource_for_endpoint(endpoint):
    for resource in RESOURCES.values():
        if resource.endpoint == endpoint:
            return resource
    raise KeyError(f"No resource for endpoint: {endpoint}")
