import pytest
import requests

from testhub.client import StorageService


class _BrokenSession:
    def request(self, *args, **kwargs):
        raise requests.ConnectionError("connection refused")


class _HtmlResponse:
    def json(self):
        raise ValueError("Expecting value")


class _HtmlSession:
    def request(self, *args, **kwargs):
        return _HtmlResponse()


@pytest.fixture
def storage(client) -> StorageService:
    return StorageService("http://testserver/", session=client)


def test_save_test_creates_then_updates(storage: StorageService, sample_test) -> None:
    created = storage.save_test(sample_test)
    assert created is not None
    assert created["name"] == "Math"

    updated = storage.save_test({**sample_test, "name": "Quant"})
    assert updated is not None
    assert updated["name"] == "Quant"

    tests = storage.get_all_tests()
    assert [test["id"] for test in tests] == ["t1"]
    assert storage.get_test_by_id("t1")["name"] == "Quant"


def test_missing_test_is_none(storage: StorageService) -> None:
    assert storage.get_test_by_id("missing") is None
    assert storage.delete_test("missing") is False


def test_attempt_round_trip(storage: StorageService, sample_test, result_payload) -> None:
    storage.save_test(sample_test)
    first = storage.save_attempt(result_payload("t1", 70))
    second = storage.save_attempt(result_payload("t1", 90))
    assert first is not None and second is not None

    assert storage.get_result(first["attemptId"])["percentage"] == 70
    results = storage.get_results_for_test("t1")
    assert results["stats"]["attempts"] == 2
    assert results["stats"]["best"] == 90

    history = storage.get_attempt_history()
    assert history["t1"]["lastAttemptId"] == second["attemptId"]

    assert storage.delete_test("t1") is True
    assert storage.get_results_for_test("t1")["results"] == []


def test_init_data_and_health(storage: StorageService, sample_test) -> None:
    assert storage.init_data([sample_test]) == "Initialized database with 1 tests"
    assert storage.init_data([sample_test]) == "Database already contains 1 tests"
    assert storage.health()["database"] == "connected"


def test_failed_save_returns_none(storage: StorageService) -> None:
    assert storage.save_test({"id": "t1", "name": "No subject"}) is None
    assert storage.save_attempt({"percentage": 10}) is None


@pytest.mark.parametrize("session", [_BrokenSession(), _HtmlSession()])
def test_transport_failures_downgrade_to_defaults(session, sample_test) -> None:
    storage = StorageService("http://localhost:1", session=session)

    assert storage.get_all_tests() == []
    assert storage.get_test_by_id("t1") is None
    assert storage.save_test(sample_test) is None
    assert storage.delete_test("t1") is False
    assert storage.save_attempt({"testId": "t1"}) is None
    assert storage.get_results_for_test("t1") == {}
    assert storage.get_result("attempt-1-abc") is None
    assert storage.get_attempt_history() == {}
    assert storage.init_data([sample_test]) is None
    assert storage.health() is None
