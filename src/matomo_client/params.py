"""
Wire encoding for Matomo API parameters.

Top-level requests flatten sequences into comma separated strings, which is
what the reporting API expects for ``idSites``, ``columns`` and friends. Bulk
sub-requests keep their structure and use PHP bracket notation instead.
"""

from __future__ import annotations

import json
import typing as t
from collections.abc import Mapping
from urllib.parse import urlencode

Scalar = str | int | float | bool
ParamValue = Scalar | t.Sequence[Scalar] | Mapping[str, t.Any] | None
Params = Mapping[str, t.Any]

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def encode_scalar(value: t.Any) -> str:
    """
    Encode a scalar value as a wire string.

    Parameters
    ----------
    value : typing.Any
        Scalar parameter value.

    Returns
    -------
    str
        ``"1"``/``"0"`` for booleans, ``str(value)`` otherwise.
    """
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(object=value)


def _bracket_pairs(*, key: str, value: t.Any, list_suffix: bool) -> list[tuple[str, str]]:
    """
    Expand nested values into PHP bracket key/value pairs.

    Parameters
    ----------
    key : str
        Parameter key, possibly already bracketed.
    value : typing.Any
        Value to expand.
    list_suffix : bool
        Emit ``key[]`` pairs for sequences instead of comma-joining them.

    Returns
    -------
    list[tuple[str, str]]
        Flat key/value pairs in input order.
    """
    if value is None:
        return []
    if isinstance(value, Mapping):
        pairs: list[tuple[str, str]] = []
        for sub_key, sub_value in value.items():
            pairs.extend(
                _bracket_pairs(
                    key=f"{key}[{sub_key}]",
                    value=sub_value,
                    list_suffix=list_suffix,
                )
            )
        return pairs
    if isinstance(value, _SEQUENCE_TYPES):
        items = [item for item in value if item is not None]
        if any(isinstance(item, (Mapping, *_SEQUENCE_TYPES)) for item in items):
            pairs = []
            for index, item in enumerate(items):
                pairs.extend(
                    _bracket_pairs(key=f"{key}[{index}]", value=item, list_suffix=list_suffix)
                )
            return pairs
        if not list_suffix:
            return [(key, ",".join(encode_scalar(value=item) for item in items))]
        pairs = []
        for item in items:
            pairs.extend(_bracket_pairs(key=f"{key}[]", value=item, list_suffix=True))
        return pairs
    return [(key, encode_scalar(value=value))]


def flatten_params(params: Params | None) -> dict[str, str]:
    """
    Flatten a parameter bag for a top-level request.

    Parameters
    ----------
    params : Params | None
        Caller supplied parameters.

    Returns
    -------
    dict[str, str]
        Wire parameters. ``None`` values are dropped, sequences are
        comma-joined and mappings use bracket keys.
    """
    flattened: dict[str, str] = {}
    for key, value in (params or {}).items():
        for pair_key, pair_value in _bracket_pairs(key=key, value=value, list_suffix=False):
            flattened[pair_key] = pair_value
    return flattened


def encode_sub_request(*, method: str, params: Params | None) -> str:
    """
    Encode one bulk sub-request as ``method=<name>&key=value...``.

    Parameters
    ----------
    method : str
        API method name, e.g. ``"VisitsSummary.get"``.
    params : Params | None
        Call parameters.

    Returns
    -------
    str
        URL encoded query string without a leading ``?``.
    """
    pairs: list[tuple[str, str]] = [("method", method)]
    for key, value in (params or {}).items():
        pairs.extend(_bracket_pairs(key=key, value=value, list_suffix=True))
    return urlencode(query=pairs)


def compact(params: Params) -> dict[str, t.Any]:
    """
    Drop ``None`` values from a parameter bag.

    Parameters
    ----------
    params : Params
        Parameter bag built by a domain module.

    Returns
    -------
    dict[str, typing.Any]
        Copy of the bag without unset parameters.
    """
    return {key: value for key, value in params.items() if value is not None}


def join_list(value: t.Any) -> t.Any:
    """Comma-join a sequence value, leave anything else untouched."""
    if isinstance(value, _SEQUENCE_TYPES):
        return ",".join(encode_scalar(value=item) for item in value)
    return value


def dump_json(value: t.Any) -> t.Any:
    """JSON-encode a mapping or sequence value, leave strings untouched."""
    if isinstance(value, (Mapping, list, tuple)):
        return json.dumps(obj=value)
    return value
