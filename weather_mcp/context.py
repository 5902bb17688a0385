"""Per-request context handed from the transport to tool handlers."""
import uuid
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class RequestContext:
    """Inbound request metadata. Header names are lower-cased."""
    headers: Mapping[str, str] = field(default_factory=dict)
    request_id: str = field(default_factory=lambda: str(uuid.uuid4())[:8])

    def __post_init__(self):
        lowered = {k.lower(): v for k, v in self.headers.items()}
        object.__setattr__(self, "headers", MappingProxyType(lowered))

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.headers.get(name.lower(), default)

    @property
    def authorization(self) -> Optional[str]:
        return self.header("authorization")

    @property
    def user_agent(self) -> Optional[str]:
        return self.header("user-agent")

    def masked_headers(self) -> Mapping[str, str]:
        """Headers safe for logging (credentials masked)."""
        return {k: ("***" if k in _SECRET_HEADERS else v) for k, v in self.headers.items()}


_SECRET_HEADERS = {"authorization", "cookie", "x-api-key", "proxy-authorization"}
