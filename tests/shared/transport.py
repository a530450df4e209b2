from __future__ import annotations

from collections.abc import Mapping, Sequence

from evds_api_client.config import EvdsClientConfig


class Response:
    def __init__(self, status_code: int, content: bytes = b""):
        self.status_code = status_code
        self.content = content


Step = Response | Exception


class SyncSequencedClient:
    def __init__(self, steps: Sequence[Step]):
        self.steps = list(steps)
        self.calls = 0
        self.urls: list[str] = []
        self.headers: list[dict[str, str]] = []
        self.closed = False

    def get(self, url: str, *, headers: Mapping[str, str]):
        self.calls += 1
        self.urls.append(url)
        self.headers.append(dict(headers))
        step = self.steps.pop(0)
        if isinstance(step, Exception):
            raise step
        return step

    def close(self):
        self.closed = True


class AsyncSequencedClient:
    def __init__(self, steps: Sequence[Step]):
        self.steps = list(steps)
        self.calls = 0
        self.urls: list[str] = []
        self.headers: list[dict[str, str]] = []
        self.closed = False

    async def get(self, url: str, *, headers: Mapping[str, str]):
        self.calls += 1
        self.urls.append(url)
        self.headers.append(dict(headers))
        step = self.steps.pop(0)
        if isinstance(step, Exception):
            raise step
        return step

    async def aclose(self):
        self.closed = True


def build_config(*, send_key_header: bool = False) -> EvdsClientConfig:
    cfg = EvdsClientConfig(send_key_header=send_key_header)
    cfg.validate()
    return cfg
