"""Tests for form-boundary conversions."""

import pytest

from client.resources import (
    RESOURCES, decode_product, encode_product, get_resource, join_list, parse_id_list,
    parse_specifications, parse_url_list, resource_for_endpoint, specifications_text,
)


def test_url_list_keeps_order():
    assert parse_url_list(" https://b.png, https://a.png ") == ["https://b.png", "https://a.png"]
    assert parse_url_list("") == []


def test_id_list_drops_non_integers():
    assert parse_id_list("3, x, 1,, 2") == [3, 1, 2]


def test_specifications_text_parsing():
    assert parse_specifications("") == {}
    assert parse_specifications('{"Motor": []}') == {"Motor": []}
    # invalid JSON is kept as typed so it can be fixed
    assert parse_specifications('{"Motor": ') == '{"Motor": '


def test_display_helpers():
    assert join_list([1, 2]) == "1, 2"
    assert join_list("raw") == "raw"
    assert specifications_text('{"bad"') == '{"bad"'
    assert specifications_text({}) == "{}"


def test_encode_leaves_other_fields():
    payload = encode_product({"id": 1, "name": "A", "price": "10", "image_urls": []})
    assert payload["name"] == "A"
    assert payload["price"] == "10"
    assert payload["image_urls"] == "[]"


def test_decode_keeps_good_values():
    row = {"id": 1, "image_urls": ["x"], "related_products_ids": [2], "specifications": {"S": []}}
    assert decode_product(row) == row


def test_empty_form_is_a_fresh_copy():
    form = RESOURCES["products"].empty_form()
    form["image_urls"].append("x")
    assert RESOURCES["products"].empty_form()["image_urls"] == []


def test_read_only_resources_have_no_form():
    assert not get_resource("requests").editable
    with pytest.raises(ValueError):
        get_resource("applications").empty_form()


def test_lookup_by_endpoint():
    assert resource_for_endpoint("apply").key == "applications"
    with pytest.raises(KeyError):
        resource_for_endpoint("blogs")
