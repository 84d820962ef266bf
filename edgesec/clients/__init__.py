"""HTTP transport layer."""

from .http import AsyncHTTPClient, ClientConfig, HTTPClient

__all__ = ["AsyncHTTPClient", "ClientConfig", "HTTPClient"]
