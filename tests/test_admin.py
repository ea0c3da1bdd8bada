"""Tests for the deletion gate and the admin tab controller."""

from unittest.mock import MagicMock

import pytest

from client.admin import TABS, DeletionGate, TabController
from client.sync import SyncService


class TestDeletionGate:

    def test_request_replaces_pending(self):
        gate = DeletionGate()
        gate.request({"id": 1}, "qna")
        gate.request({"id": 2}, "awards")
        assert gate.pending.item == {"id": 2}
        assert gate.pending.endpoint == "awards"

    def test_cancel(self):
        gate = DeletionGate()
        gate.request({"id": 1}, "qna")
        gate.cancel()
        assert not gate.is_pending

    def test_confirm_deletes_and_refetches(self, api, session, make_response, calls):
        sync = SyncService(api)
        gate = DeletionGate()
        gate.request({"id": 5}, "qna")
        session.request.side_effect = [make_response(204, text=""), make_response(200, [])]

        assert gate.confirm(sync) is True
        assert calls() == [
            ("DELETE", "http://backend.test/api/qna/5", None),
            ("GET", "http://backend.test/api/qna", None),
        ]
        assert not gate.is_pending

    def test_gate_closes_before_delete_runs(self):
        gate = DeletionGate()
        seen = []
        sync = MagicMock()
        sync.delete_item.side_effect = lambda key, item_id: seen.append(gate.is_pending) or False
        gate.request({"id": 8}, "apply")

        assert gate.confirm(sync) is False
        sync.delete_item.assert_called_once_with("applications", 8)
        assert seen == [False]
        assert not gate.is_pending

    def test_gate_closes_when_delete_fails(self, api, session, make_response):
        sync = SyncService(api)
        gate = DeletionGate()
        gate.request({"id": 5}, "products")
        session.request.return_value = make_response(500, {"error": "constraint failed"})

        assert gate.confirm(sync) is False
        assert not gate.is_pending
        assert sync.state("products").error == "constraint failed"

    def test_dismissed_dialog_sends_nothing(self):
        gate = DeletionGate()
        sync = MagicMock()
        gate.request({"id": 3}, "media")
        on_dismiss = gate.cancel  # what the admin dialog calls on X / Esc
        on_dismiss()

        assert not gate.is_pending
        assert gate.confirm(sync) is False
        sync.delete_item.assert_not_called()

    def test_confirm_without_pending_is_noop(self):
        sync = MagicMock()
        assert DeletionGate().confirm(sync) is False
        sync.delete_item.assert_not_called()


class TestTabController:

    def test_tabs(self):
        assert TABS == ("products", "qna", "awards", "media", "requests", "applications")

    def test_mount_loads_products(self):
        sync = MagicMock()
        tabs = TabController(sync)
        tabs.mount()
        assert tabs.active == "products"
        sync.fetch.assert_called_once_with("products")

    def test_switching_always_refetches(self, api, session, make_response, calls):
        sync = SyncService(api)
        session.request.return_value = make_response(200, [{"id": 1, "question": "Q", "answer": "A"}])
        tabs = TabController(sync)
        tabs.activate("qna")
        tabs.activate("products")
        tabs.activate("qna")

        urls = [url for _, url, _ in calls()]
        assert urls.count("http://backend.test/api/qna") == 2
        assert tabs.active == "qna"

    def test_unknown_tab(self):
        with pytest.raises(ValueError):
            TabController(MagicMock()).activate("blogs")
