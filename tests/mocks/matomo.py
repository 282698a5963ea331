import typing as t
from urllib.parse import parse_qsl

import httpx


class FakeMatomoAPI:
    """
    Emulate the Matomo ``index.php`` API endpoint used in tests.

    Responses are registered per method, either as a payload or as a callable
    receiving the decoded parameters. ``API.getBulkRequest`` is answered by
    decoding every ``urls[i]`` sub-request and resolving it the same way.
    """

    def __init__(self, *, responses: dict[str, t.Any] | None = None) -> None:
        self.responses: dict[str, t.Any] = dict(responses or {})
        self.requests: list[httpx.Request] = []
        self.calls: list[dict[str, str]] = []
        self.sub_requests: list[list[tuple[str, str]]] = []
        self.bulk_override: t.Any = None

    def _read_params(self, *, request: httpx.Request) -> list[tuple[str, str]]:
        if request.method == "POST":
            body = request.read().decode("utf-8")
            return parse_qsl(qs=body, keep_blank_values=True)
        return list(request.url.params.multi_items())

    def _resolve(self, *, method: str, params: dict[str, str]) -> t.Any:
        if method not in self.responses:
            return {"result": "error", "message": f"The method '{method}' does not exist"}
        response = self.responses[method]
        if callable(response):
            return response(params)
        return response

    def _bulk_payload(self, *, params: dict[str, str]) -> list[t.Any]:
        """
        Decode the ``urls[i]`` sub-requests and resolve each of them.

        Parameters
        ----------
        params : dict[str, str]
            Decoded top-level parameters.

        Returns
        -------
        list[typing.Any]
            One payload per sub-request, in index order.
        """
        indexes = sorted(
            int(key[len("urls[") : -1]) for key in params if key.startswith("urls[")
        )
        results = []
        for index in indexes:
            pairs = parse_qsl(qs=params[f"urls[{index}]"], keep_blank_values=True)
            self.sub_requests.append(pairs)
            sub_params = dict(pairs)
            results.append(self._resolve(method=sub_params.get("method", ""), params=sub_params))
        return results

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        params = dict(self._read_params(request=request))
        self.calls.append(params)
        method = params.get("method", "")

        if method == "API.getBulkRequest":
            if self.bulk_override is not None:
                return httpx.Response(status_code=200, json=self.bulk_override)
            return httpx.Response(status_code=200, json=self._bulk_payload(params=params))

        payload = self._resolve(method=method, params=params)
        if isinstance(payload, httpx.Response):
            return payload
        return httpx.Response(status_code=200, json=payload)


def make_matomo_transport(
    *,
    responses: dict[str, t.Any] | None = None,
) -> tuple[FakeMatomoAPI, httpx.MockTransport]:
    """
    Create a fake Matomo API and its mock transport.

    Parameters
    ----------
    responses : dict[str, typing.Any] | None, optional
        Payloads or factories keyed by API method.

    Returns
    -------
    tuple[FakeMatomoAPI, httpx.MockTransport]
        Fake API recording calls and the transport routing to it.
    """
    api = FakeMatomoAPI(responses=responses)
    return api, httpx.MockTransport(handler=api.handler)
