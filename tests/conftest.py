from concurrent.futures import Future

import pytest
import requests

import config


class FakeResponse:
    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code
        self.encoding = None

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeSheet:
    """Stands in for both Google endpoints; records every call."""

    def __init__(self):
        self.csv = ""
        self.read_status = 200
        self.read_error = None
        self.write_status = 200
        self.write_error = None
        self.reads = []
        self.writes = []

    def get(self, url, **kwargs):
        self.reads.append(url)
        if self.read_error is not None:
            raise self.read_error
        return FakeResponse(self.csv, self.read_status)

    def request(self, method, url, **kwargs):
        self.writes.append({
            "method": method,
            "url": url,
            "params": kwargs.get("data") or kwargs.get("params"),
            "kwargs": kwargs,
        })
        if self.write_error is not None:
            raise self.write_error
        return FakeResponse("", self.write_status)


class ManualExecutor:
    """Holds submitted writes until the test runs them."""

    def __init__(self):
        self.queue = []

    def submit(self, fn, *args, **kwargs):
        future = Future()
        self.queue.append((future, fn, args, kwargs))
        return future

    def run_all(self):
        while self.queue:
            future, fn, args, kwargs = self.queue.pop(0)
            try:
                future.set_result(fn(*args, **kwargs))
            except Exception as e:  # noqa: BLE001
                future.set_exception(e)


@pytest.fixture
def fake_sheet(monkeypatch: pytest.MonkeyPatch) -> FakeSheet:
    fake = FakeSheet()
    monkeypatch.setattr(requests, "get", fake.get)
    monkeypatch.setattr(requests, "request", fake.request)
    monkeypatch.setattr(config, "WRITE_METHOD", "POST")
    monkeypatch.setattr(config, "WRITE_ROW_OFFSET", 1)
    return fake


@pytest.fixture
def executor() -> ManualExecutor:
    return ManualExecutor()


@pytest.fixture
def service(fake_sheet: FakeSheet, executor: ManualExecutor):
    from service import SheetService

    return SheetService(executor=executor)
