"""
Shared fixtures: in-memory RDTs standing in for a server
"""

import json

import pytest


class FakeRDT:
    """Answers every request straight away with a canned response"""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, callback):
        self.calls.append(("get", url))
        callback(self.error, None if self.error else self.response)

    def post(self, url, body, callback):
        self.calls.append(("post", url, body))
        callback(self.error, None if self.error else self.response)

    def destroy(self, url, callback):
        self.calls.append(("destroy", url))
        callback(self.error, None if self.error else self.response)


class DeferredRDT(FakeRDT):
    """Holds callbacks until flush() is called"""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.pending = []

    def get(self, url, callback):
        self.calls.append(("get", url))
        self.pending.append(callback)

    def post(self, url, body, callback):
        self.calls.append(("post", url, body))
        self.pending.append(callback)

    def destroy(self, url, callback):
        self.calls.append(("destroy", url))
        self.pending.append(callback)

    def flush(self):
        pending, self.pending = self.pending, []
        for callback in pending:
            callback(self.error, None if self.error else self.response)


@pytest.fixture
def user_json():
    return json.dumps({"user": {"firstName": "test", "lastName": "spec"}})


@pytest.fixture
def fake_rdt():
    return FakeRDT


@pytest.fixture
def deferred_rdt():
    return DeferredRDT


class SingleArgRDT:
    """Calls back with the response only, or with a lone exception"""

    def __init__(self, response=None):
        self.response = response

    def get(self, url, callback):
        callback(self.response)

    def post(self, url, body, callback):
        callback(self.response)

    def destroy(self, url, callback):
        callback(self.response)


@pytest.fixture
def single_arg_rdt():
    return SingleArgRDT
