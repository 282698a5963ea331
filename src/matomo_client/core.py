"""
Transport for the Matomo Reporting API.

``CoreReportingClient`` turns one logical call (method name and parameter bag)
into a single HTTP round trip, and a list of queued calls into one
``API.getBulkRequest`` round trip.
"""

from __future__ import annotations

import typing as t
from collections.abc import Mapping

import httpx
import structlog

from matomo_client.config import ClientOptions, ResponseFormat
from matomo_client.exceptions import (
    ApiError,
    BatchResultMismatchError,
    TransportError,
    is_error_envelope,
)
from matomo_client.params import Params, encode_scalar, encode_sub_request, flatten_params
from matomo_client.utils.logging import mask_secrets

if t.TYPE_CHECKING:
    from matomo_client.batch import BatchRequest

log = structlog.get_logger(__name__)

BULK_METHOD = "API.getBulkRequest"


class PendingCallLike(t.Protocol):
    """
    Minimal shape required to encode a bulk sub-request.

    Attributes
    ----------
    method : str
        API method name.
    params : Mapping[str, typing.Any]
        Call parameters.
    """

    method: str
    params: Mapping[str, t.Any]


class CoreReportingClient:
    """
    Perform Matomo API calls over HTTP.

    Parameters
    ----------
    options : ClientOptions | None, optional
        Connection settings. When omitted, ``**kwargs`` are validated into
        ``ClientOptions``.
    transport : httpx.AsyncBaseTransport | None, optional
        Custom httpx transport, mostly useful for testing.
    **kwargs : typing.Any
        ``ClientOptions`` fields used when ``options`` is omitted.
    """

    def __init__(
        self,
        options: ClientOptions | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        **kwargs: t.Any,
    ) -> None:
        self._options = options if options is not None else ClientOptions(**kwargs)
        self._client_factory: t.Callable[[], httpx.AsyncClient] = lambda: httpx.AsyncClient(
            timeout=self._options.timeout,
            transport=transport,
        )
        log.debug(
            event="Initialized Matomo client",
            url=self._options.url,
            format=self._options.format,
            security_mode=self._options.security_mode,
            has_token=self._options.token_auth is not None,
        )

    @property
    def options(self) -> ClientOptions:
        return self._options

    @property
    def base_url(self) -> str:
        return self._options.url

    def build_request_params(
        self,
        method: str,
        params: Params | None = None,
        *,
        response_format: ResponseFormat | None = None,
    ) -> dict[str, str]:
        """
        Merge protocol, credential, default and caller parameters.

        Parameters
        ----------
        method : str
            API method name.
        params : Params | None, optional
            Caller parameters.
        response_format : ResponseFormat | None, optional
            Format overriding the configured one.

        Returns
        -------
        dict[str, str]
            Wire parameters, caller values taking precedence over defaults.
        """
        params = params or {}
        request_params: dict[str, str] = {
            "module": "API",
            "method": method,
            "format": response_format or self._options.format,
        }
        if self._options.token_auth:
            request_params["token_auth"] = self._options.token_auth
        if self._options.id_site is not None and params.get("idSite") is None:
            request_params["idSite"] = encode_scalar(value=self._options.id_site)
        if self._options.language and not params.get("language"):
            request_params["language"] = self._options.language
        request_params.update(flatten_params(params=params))
        return request_params

    async def request(
        self,
        method: str,
        params: Params | None = None,
        *,
        response_format: ResponseFormat | None = None,
    ) -> t.Any:
        """
        Call one API method and decode its response.

        Parameters
        ----------
        method : str
            API method name, e.g. ``"API.getMatomoVersion"``.
        params : Params | None, optional
            Call parameters.
        response_format : ResponseFormat | None, optional
            Format overriding the configured one.

        Returns
        -------
        typing.Any
            Decoded JSON payload, response text for textual formats, or the
            raw ``httpx.Response`` for the ``original`` format.

        Raises
        ------
        TransportError
            On network, HTTP or decoding failures.
        ApiError
            When Matomo answers with an error envelope.
        """
        response_format = response_format or self._options.format
        request_params = self.build_request_params(
            method,
            params,
            response_format=response_format,
        )
        http_method = "POST" if self._options.security_mode else "GET"
        log.debug(
            event="Dispatching Matomo request",
            method=method,
            http_method=http_method,
            format=response_format,
            params=mask_secrets(params=request_params),
        )
        try:
            async with self._client_factory() as client:
                if self._options.security_mode:
                    response = await client.post(url=self._options.endpoint, data=request_params)
                else:
                    response = await client.get(url=self._options.endpoint, params=request_params)
        except httpx.HTTPError as error:
            log.error(
                event="Matomo request failed",
                method=method,
                error_type=type(error).__name__,
                error=str(object=error),
            )
            raise TransportError(f"Matomo request failed: {error}") from error

        return self._decode_response(
            method=method,
            response=response,
            response_format=response_format,
        )

    async def dispatch(self, method: str, params: Params | None = None) -> t.Any:
        """Call the API right away. Satisfies ``RequestSink`` for domain modules."""
        return await self.request(method, params)

    def _decode_response(
        self,
        *,
        method: str,
        response: httpx.Response,
        response_format: ResponseFormat,
    ) -> t.Any:
        """
        Classify and decode an HTTP response.

        Parameters
        ----------
        method : str
            API method that was called.
        response : httpx.Response
            Received response.
        response_format : ResponseFormat
            Format requested from the API.

        Returns
        -------
        typing.Any
            Decoded payload.
        """
        if not response.is_success:
            payload = self._try_json(response=response)
            if is_error_envelope(payload=payload):
                self._raise_api_error(method=method, payload=payload)
            log.error(
                event="Matomo HTTP error",
                method=method,
                status_code=response.status_code,
            )
            raise TransportError(
                f"Matomo request failed with HTTP {response.status_code}",
                status_code=response.status_code,
            )

        if response_format == "original":
            return response
        if response_format != "json":
            return response.text

        try:
            payload = response.json()
        except ValueError as error:
            log.error(
                event="Matomo response is not valid JSON",
                method=method,
                status_code=response.status_code,
            )
            raise TransportError(
                f"Could not decode Matomo response: {error}",
                status_code=response.status_code,
            ) from error

        if is_error_envelope(payload=payload):
            self._raise_api_error(method=method, payload=payload)
        return payload

    @staticmethod
    def _try_json(*, response: httpx.Response) -> t.Any:
        try:
            return response.json()
        except ValueError:
            return None

    @staticmethod
    def _raise_api_error(*, method: str, payload: dict[str, t.Any]) -> t.NoReturn:
        message = str(object=payload.get("message", ""))
        log.warning(event="Matomo API error", method=method, message=message)
        raise ApiError(message, method=method, payload=payload)

    def _with_defaults(self, *, params: Params) -> dict[str, t.Any]:
        """
        Inject the default site and language into a sub-request.

        Parameters
        ----------
        params : Params
            Sub-request parameters.

        Returns
        -------
        dict[str, typing.Any]
            Parameters with defaults added where the caller left them unset.
        """
        merged = dict(params)
        if self._options.id_site is not None and merged.get("idSite") is None:
            merged["idSite"] = self._options.id_site
        if self._options.language and not merged.get("language"):
            merged["language"] = self._options.language
        return merged

    async def batch_request(self, calls: t.Sequence[PendingCallLike]) -> list[t.Any]:
        """
        Send queued calls as one ``API.getBulkRequest`` round trip.

        Parameters
        ----------
        calls : typing.Sequence[PendingCallLike]
            Calls in the order their results must be returned.

        Returns
        -------
        list[typing.Any]
            One decoded result per call, in call order.

        Raises
        ------
        BatchResultMismatchError
            When the bulk response does not hold exactly one result per call.
        """
        if not calls:
            raise ValueError("Cannot process an empty request batch")

        bulk_params: dict[str, str] = {}
        for index, call in enumerate(calls):
            bulk_params[f"urls[{index}]"] = encode_sub_request(
                method=call.method,
                params=self._with_defaults(params=call.params),
            )
        log.info(
            event="Submitting bulk request",
            request_count=len(calls),
            methods=[call.method for call in calls],
        )
        payload = await self.request(BULK_METHOD, bulk_params, response_format="json")

        if not isinstance(payload, list):
            log.error(event="Bulk response is not a list", payload_type=type(payload).__name__)
            raise BatchResultMismatchError(expected=len(calls), received=None)
        if len(payload) != len(calls):
            log.error(
                event="Bulk response size mismatch",
                expected=len(calls),
                received=len(payload),
            )
            raise BatchResultMismatchError(expected=len(calls), received=len(payload))
        return payload

    async def bulk_request(self, methods: Mapping[str, Params | None]) -> dict[str, t.Any]:
        """
        Call several methods in one round trip, keyed by method name.

        Each method can appear only once. Queue repeated methods on a
        ``BatchRequest`` instead.

        Parameters
        ----------
        methods : Mapping[str, Params | None]
            Method names mapped to their parameters.

        Returns
        -------
        dict[str, typing.Any]
            Method names mapped to their results.
        """
        from matomo_client.batch import PendingCall

        if not methods:
            return {}
        calls = [PendingCall(method=method, params=params or {}) for method, params in methods.items()]
        results = await self.batch_request(calls)
        return dict(zip(methods.keys(), results))

    def prepare_requests(self) -> BatchRequest:
        """
        Create a batch request builder bound to this client.

        Returns
        -------
        BatchRequest
            Fresh, empty batch.
        """
        from matomo_client.batch import BatchRequest

        return BatchRequest(client=self)
