from .address_resolver import resolve_address
from .endpoint_resolver import EndpointResolver

__all__ = ["EndpointResolver", "resolve_address"]
