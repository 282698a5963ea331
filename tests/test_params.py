"""
Tests for parameter wire encoding in matomo_client.params.
"""

from urllib.parse import parse_qsl

import pytest

from matomo_client.params import (
    compact,
    dump_json,
    encode_scalar,
    encode_sub_request,
    flatten_params,
    join_list,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (True, "1"),
        (False, "0"),
        (7, "7"),
        (1.5, "1.5"),
        ("day", "day"),
    ],
)
def test_encode_scalar(value, expected):
    assert encode_scalar(value=value) == expected


def test_flatten_params_joins_scalar_lists():
    assert flatten_params(params={"idSites": [1, 2, 3], "period": "day"}) == {
        "idSites": "1,2,3",
        "period": "day",
    }


def test_flatten_params_drops_none_values():
    assert flatten_params(params={"segment": None, "date": "today"}) == {"date": "today"}


def test_flatten_params_expands_mappings_with_brackets():
    flattened = flatten_params(params={"parameters": {"customHtml": "<p/>", "inline": True}})
    assert flattened == {
        "parameters[customHtml]": "<p/>",
        "parameters[inline]": "1",
    }


def test_flatten_params_indexes_lists_of_mappings():
    flattened = flatten_params(
        params={
            "conditions": [
                {"actual": "PageUrl", "comparison": "contains", "expected": "/shop"},
                {"actual": "PageTitle", "comparison": "equals", "expected": "Home"},
            ]
        }
    )
    assert flattened == {
        "conditions[0][actual]": "PageUrl",
        "conditions[0][comparison]": "contains",
        "conditions[0][expected]": "/shop",
        "conditions[1][actual]": "PageTitle",
        "conditions[1][comparison]": "equals",
        "conditions[1][expected]": "Home",
    }


def test_flatten_params_empty():
    assert flatten_params(params=None) == {}
    assert flatten_params(params={}) == {}


def test_encode_sub_request_starts_with_method():
    encoded = encode_sub_request(
        method="VisitsSummary.get",
        params={"idSite": 1, "period": "day", "date": "today"},
    )
    assert encoded == "method=VisitsSummary.get&idSite=1&period=day&date=today"
    assert not encoded.startswith("?")


def test_encode_sub_request_uses_array_keys_for_lists():
    encoded = encode_sub_request(method="SitesManager.addSite", params={"urls": ["a.org", "b.org"]})
    assert parse_qsl(qs=encoded) == [
        ("method", "SitesManager.addSite"),
        ("urls[]", "a.org"),
        ("urls[]", "b.org"),
    ]


def test_encode_sub_request_encodes_reserved_characters():
    encoded = encode_sub_request(
        method="VisitsSummary.get",
        params={"segment": "browserCode==FF;country==fr", "flat": False},
    )
    assert "segment=browserCode%3D%3DFF%3Bcountry%3D%3Dfr" in encoded
    assert parse_qsl(qs=encoded) == [
        ("method", "VisitsSummary.get"),
        ("segment", "browserCode==FF;country==fr"),
        ("flat", "0"),
    ]


def test_encode_sub_request_without_params():
    assert encode_sub_request(method="API.getMatomoVersion", params=None) == (
        "method=API.getMatomoVersion"
    )


def test_compact_keeps_falsy_values():
    assert compact(params={"a": None, "b": 0, "c": False, "d": ""}) == {
        "b": 0,
        "c": False,
        "d": "",
    }


def test_join_list():
    assert join_list(value=["nb_visits", "nb_actions"]) == "nb_visits,nb_actions"
    assert join_list(value=(1, 2)) == "1,2"
    assert join_list(value="1,2") == "1,2"
    assert join_list(value=None) is None


def test_dump_json():
    assert dump_json(value={"displayFormat": 1}) == '{"displayFormat": 1}'
    assert dump_json(value=["VisitsSummary_get"]) == '["VisitsSummary_get"]'
    assert dump_json(value='["raw"]') == '["raw"]'
    assert dump_json(value=None) is None
