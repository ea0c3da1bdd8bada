# models/product.py
import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError, ValidationInfo, field_validator

URL_LIST = TypeAdapter(List[str])
ID_LIST = TypeAdapter(List[int])
SPEC_MAP = TypeAdapter(Dict[str, Any])


def _json_text(value, adapter, default):
    """Accept a JSON string (or the already-decoded value), check its shape, return JSON text."""
    if value is None or value == "":
        return default
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError:
            raise ValueError("must be a JSON string")
    try:
        decoded = adapter.validate_python(value)
    except ValidationError as e:
        first = e.errors()[0]
        where = ".".join(str(p) for p in first["loc"])
        raise ValueError(f"{where}: {first['msg']}" if where else first["msg"])
    return json.dumps(decoded, separators=(",", ":"))


class ProductBase(BaseModel):
    name: str
    tagline: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    category: Optional[str] = None
    main_image_url: Optional[str] = None
    video_url: Optional[str] = None
    features_text: Optional[str] = None
    tco_savings_text: Optional[str] = None
    tco_savings_image_url: Optional[str] = None

    @field_validator("price", mode="before")
    @classmethod
    def blank_price(cls, v):
        # forms send "" for an empty number input
        return None if v == "" else v


class ProductCreate(ProductBase):
    # list/mapping fields travel as JSON text
    image_urls: str = "[]"
    related_products_ids: str = "[]"
    specifications: str = "{}"

    @field_validator("image_urls", mode="before")
    @classmethod
    def url_list(cls, v):
        return _json_text(v, URL_LIST, "[]")

    @field_validator("related_products_ids", mode="before")
    @classmethod
    def id_list(cls, v):
        return _json_text(v, ID_LIST, "[]")

    @field_validator("specifications", mode="before")
    @classmethod
    def spec_map(cls, v):
        return _json_text(v, SPEC_MAP, "{}")


class Product(ProductBase):
    id: int
    image_urls: List[str] = []
    related_products_ids: List[int] = []
    specifications: Dict[str, Any] = {}
    created_at: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator("image_urls", "related_products_ids", "specifications", mode="before")
    @classmethod
    def decode_json(cls, v, info: ValidationInfo):
        if v is None or v == "":
            return {} if info.field_name == "specifications" else []
        if isinstance(v, str):
            return json.loads(v)
        return v
