from .upstream import UpstreamClient, UpstreamError, get_upstream_client

__all__ = ["UpstreamClient", "UpstreamError", "get_upstream_client"]
