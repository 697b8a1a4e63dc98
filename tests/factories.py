"""Fakes and record builders shared by the tests. Nothing here touches the network."""

import requests

from models.match_model import MatchRecord


class FakeResponse:
    def __init__(self, body=None, status=200, bad_json=False):
        self.body = body
        self.status_code = status
        self.bad_json = bad_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP error! status: {self.status_code}")

    def json(self):
        if self.bad_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.body


class FakeSession:
    """Records GET calls and replays queued responses (or raises queued errors)."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": dict(params or {}), "timeout": timeout})
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


def make_record(**overrides):
    values = dict(
        player="Ann", opponent="Bo", format="Modern",
        player_deck="Burn", opponent_deck="Control",
        games="2-1", date="2024-05-01",
    )
    values.update(overrides)
    return MatchRecord(**values)




class MemoryStorage:
    """Stands in for AppsScriptClient: keeps appended records in a list."""

    def __init__(self, records=None, accept=True):
        self.records = list(records or [])
        self.accept = accept
        self.appended = []
        self.fetches = 0

    def fetch_all(self):
        self.fetches += 1
        return list(self.records)

    def append(self, record):
        self.appended.append(record)
        if self.accept:
            self.records.append(record)
        return self.accept
