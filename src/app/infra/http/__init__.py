"""Cliente HTTP assíncrono para chamadas externas."""

from app.infra.http.client import HttpClient, HttpClientConfig, HttpError

__all__ = ["HttpClient", "HttpClientConfig", "HttpError"]
