"""
Tests for the operational scripts
"""

from unittest.mock import MagicMock

import httpx
from pymongo import ASCENDING
from pymongo.errors import OperationFailure

from mycare.scripts import fix_join_request_index as migration
from mycare.scripts.smoke_test import run_smoke_test, TEST_USER

class TestSmokeTest:
    """Test cases for the API smoke test"""

    def test_full_run_against_stub_backend(self, client, capsys):
        """Test register returns a token and the profile fetch succeeds"""
        results = run_smoke_test(client)

        assert results["register"]["status_code"] == 201
        assert results["login"]["status_code"] == 200
        assert results["profile"]["status_code"] == 200
        assert results["profile"]["data"]["user"]["email"] == TEST_USER["email"]
        assert results["token"]

        output = capsys.readouterr().out
        assert "Testing Registration..." in output
        assert "Status Code: 201" in output
        assert "Auth token received:" in output

    def test_second_run_still_logs_in(self, client):
        """Test a repeated run fails registration but still reaches the profile"""
        run_smoke_test(client)
        results = run_smoke_test(client)

        assert results["register"]["status_code"] == 400
        assert results["login"]["status_code"] == 200
        assert results["profile"]["status_code"] == 200

    def test_profile_skipped_without_token(self, capsys):
        """Test the profile step is skipped when no token was issued"""
        handler = lambda request: httpx.Response(500, text="down")
        with httpx.Client(base_url="http://testserver", transport=httpx.MockTransport(handler)) as client:
            results = run_smoke_test(client)

        assert results["register"] == {"status_code": 500, "data": "down"}
        assert results["profile"] is None
        assert "Skipping Profile Test - No auth token available" in capsys.readouterr().out

    def test_non_string_token_is_ignored(self, capsys):
        """Test a malformed token neither crashes the run nor reaches the profile step"""
        handler = lambda request: httpx.Response(200, json={"token": 12345})
        with httpx.Client(base_url="http://testserver", transport=httpx.MockTransport(handler)) as client:
            results = run_smoke_test(client)

        assert results["token"] is None
        assert results["profile"] is None
        assert "Skipping Profile Test" in capsys.readouterr().out

    def test_unreachable_server(self):
        """Test connection errors are reported, not raised"""
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with httpx.Client(base_url="http://testserver", transport=httpx.MockTransport(handler)) as client:
            results = run_smoke_test(client)

        assert results["register"] is None
        assert results["login"] is None
        assert results["token"] is None

class TestFixJoinRequestIndex:
    """Test cases for the joinrequests index migration"""

    def make_client(self):
        collection = MagicMock()
        database = MagicMock()
        database.__getitem__.return_value = collection
        client = MagicMock()
        client.get_default_database.return_value = database
        return client, database, collection

    def test_index_changes(self):
        """Test the old index is dropped and the three new ones created"""
        client, database, collection = self.make_client()

        status = migration.run("mongodb://localhost/mycare", client_factory=lambda uri: client)

        assert status == 0
        database.__getitem__.assert_called_once_with("joinrequests")
        collection.drop_index.assert_called_once_with("user_1_community_1_status_1")
        assert collection.create_index.call_args_list[0].args == ([("user", ASCENDING), ("community", ASCENDING)],)
        assert collection.create_index.call_args_list[0].kwargs == {
            "unique": True,
            "partialFilterExpression": {"status": "pending"}
        }
        assert collection.create_index.call_args_list[1].args == ([("community", ASCENDING), ("status", ASCENDING)],)
        assert collection.create_index.call_args_list[2].args == ([("user", ASCENDING), ("status", ASCENDING)],)
        client.close.assert_called_once()

    def test_missing_uri_fails(self):
        """Test the migration refuses to run without MONGO_URI"""
        factory = MagicMock()
        assert migration.run(None, client_factory=factory) == 1
        factory.assert_not_called()

    def test_database_error_fails_and_disconnects(self):
        """Test a failing index operation exits non-zero and still closes the client"""
        client, _, collection = self.make_client()
        collection.drop_index.side_effect = OperationFailure("index not found")

        assert migration.run("mongodb://localhost/mycare", client_factory=lambda uri: client) == 1
        collection.create_index.assert_not_called()
        client.close.assert_called_once()
