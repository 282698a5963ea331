from .batch import BatchRequest as BatchRequest
from .batch import BatchSlot as BatchSlot
from .batch import PendingCall as PendingCall
from .client import ReportingClient as ReportingClient
from .config import ClientOptions as ClientOptions
from .core import CoreReportingClient as CoreReportingClient
from .exceptions import ApiError as ApiError
from .exceptions import BatchResultMismatchError as BatchResultMismatchError
from .exceptions import BatchStateError as BatchStateError
from .exceptions import MatomoError as MatomoError
from .exceptions import TransportError as TransportError

__version__ = "0.1.0"

__all__ = [
    "ReportingClient",
    "CoreReportingClient",
    "BatchRequest",
    "BatchSlot",
    "PendingCall",
    "ClientOptions",
    "MatomoError",
    "TransportError",
    "BatchResultMismatchError",
    "ApiError",
    "BatchStateError",
]
