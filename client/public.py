# client/public.py
"""Calls behind the public pages: catalog, blogs, galleries and lead forms."""

import logging
import random
from dataclasses import dataclass

from config import ConfigurationError
from client.api import ApiError

logger = logging.getLogger(__name__)

RELATED_COUNT = 2
REQUEST_TYPES = ("order", "demo")
BUYER_TYPES = ("individual", "company")

EMPTY_REQUEST_FORM = {
    "full_name": "",
    "phone_number": "",
    "email": "",
    "address": "",
    "country": "",
    "state": "",
    "city": "",
    "pincode": "",
    "aadhar_number": "",
    "company_name": "",
    "pan_number": "",
    "product_name": "",
    "quantity": 1,
    "message": "",
}


@dataclass
class Submission:
    status: str  # "success" or "error"
    message: str

    @property
    def ok(self):
        return self.status == "success"


def pick_related(items, current_id, count=RELATED_COUNT, rng=None):
    """Up to ``count`` random items other than ``current_id``."""
    others = [i for i in items if i and i.get("id") != current_id]
    rng = rng or random
    return rng.sample(others, min(count, len(others)))


def build_request_payload(form, request_type="order", buyer_type="individual"):
    if request_type not in REQUEST_TYPES:
        raise ValueError(f"request_type must be one of {REQUEST_TYPES}")
    if buyer_type not in BUYER_TYPES:
        raise ValueError(f"buyer_type must be one of {BUYER_TYPES}")
    data = {**EMPTY_REQUEST_FORM, **form}
    return {
        "request_type": request_type,
        "product_name": data["product_name"],
        "full_name": data["full_name"],
        "email": data["email"],
        "phone_number": data["phone_number"],
        "address": data["address"],
        "country": data["country"],
        "state": data["state"],
        "city": data["city"],
        "pincode": data["pincode"],
        "message": data["message"],
        "quantity": data["quantity"],
        "company_name": data["company_name"] if buyer_type == "company" else None,
        "aadhar_number": data["aadhar_number"] if buyer_type == "individual" else None,
        "pan_number": data["pan_number"] or None,
    }


class SiteClient:
    def __init__(self, api, rng=None):
        self.api = api
        self.rng = rng

    # ---------------- reads (raise ApiError / ConfigurationError) ----------------

    def list_products(self):
        return self.api.get("products") or []

    def product_detail(self, product_id):
        """The product plus a couple of other products to suggest."""
        product = self.api.get(f"products/{product_id}")
        related = pick_related(self.list_products(), product.get("id"), rng=self.rng)
        return product, related

    def list_blogs(self):
        return self.api.get("blogs") or []

    def blog_detail(self, blog_id):
        blog = self.api.get(f"blogs/{blog_id}")
        related = pick_related(self.list_blogs(), blog.get("id"), rng=self.rng)
        return blog, related

    def list_awards(self):
        return self.api.get("awards") or []

    def list_media(self):
        return self.api.get("media") or []

    def list_qna(self):
        return self.api.get("qna") or []

    # ---------------- lead forms ----------------

    def _submit(self, path, payload, action, success_message):
        try:
            self.api.post(path, payload)
        except (ApiError, ConfigurationError) as e:
            logger.error("Failed to %s: %s", action, e)
            return Submission("error", f"Failed to {action}: {e}")
        logger.info("Submitted %s", path)
        return Submission("success", success_message)

    def submit_request(self, form, request_type="order", buyer_type="individual"):
        payload = build_request_payload(form, request_type, buyer_type)
        return self._submit(
            "requests", payload,
            f"submit {request_type}",
            f"Your {request_type} request has been submitted successfully!",
        )

    def apply(self, name, email, position):
        return self._submit(
            "apply", {"name": name, "email": email, "position": position},
            "submit application",
            "Your application has been submitted successfully!",
        )

    def subscribe(self, email):
        return self._submit(
            "subscribe", {"email": email},
            "subscribe",
            "Thank you for subscribing!",
        )
