"""
tests/core/graph/test_graph_client.py - Graph REST 클라이언트 테스트
"""

import pytest
import requests

from core.exceptions import RemoteUnavailableError
from core.graph.client import NEXT_LINK, GraphClient


class TestUrl:
    def test_relative_path(self, graph_session):
        assert GraphClient(graph_session)._url("/organization") == "https://graph.example.test/v1.0/organization"

    def test_absolute_url_passthrough(self, graph_session):
        url = "https://graph.example.test/v1.0/auditLogs/signIns?$skiptoken=x"
        assert GraphClient(graph_session)._url(url) == url


class TestGet:
    """GraphClient.get 테스트"""

    def test_success(self, graph_session, make_response):
        graph_session.http.get.return_value = make_response({"value": [1]})

        data = GraphClient(graph_session).get("/organization", params={"$top": 1})

        assert data == {"value": [1]}
        graph_session.http.get.assert_called_once_with(
            "https://graph.example.test/v1.0/organization", params={"$top": 1}, timeout=5
        )

    def test_http_error_mapped(self, graph_session, make_response):
        response = make_response({"error": {"code": "Forbidden", "message": "no access"}}, status_code=403)
        response.raise_for_status.side_effect = requests.HTTPError("403", response=response)
        graph_session.http.get.return_value = response

        with pytest.raises(RemoteUnavailableError) as exc_info:
            GraphClient(graph_session).get("/auditLogs/signIns", operation="list_signins")

        assert exc_info.value.operation == "list_signins"
        assert exc_info.value.status_code == 403
        assert exc_info.value.error_code == "Forbidden"

    def test_network_error_mapped(self, graph_session):
        graph_session.http.get.side_effect = requests.Timeout("timed out")

        with pytest.raises(RemoteUnavailableError) as exc_info:
            GraphClient(graph_session).get("/organization")

        assert isinstance(exc_info.value.cause, requests.Timeout)

    def test_invalid_json(self, graph_session, make_response):
        response = make_response()
        response.json.side_effect = ValueError("bad json")
        graph_session.http.get.return_value = response

        with pytest.raises(RemoteUnavailableError):
            GraphClient(graph_session).get("/organization")

    def test_non_object_body(self, graph_session, make_response):
        graph_session.http.get.return_value = make_response([1, 2])

        with pytest.raises(RemoteUnavailableError):
            GraphClient(graph_session).get("/organization")


class TestGetAll:
    """페이지네이션 테스트"""

    def test_follows_next_link(self, graph_session, make_response):
        graph_session.http.get.side_effect = [
            make_response({"value": [1, 2], NEXT_LINK: "https://graph.example.test/v1.0/x?page=2"}),
            make_response({"value": [3], NEXT_LINK: "https://graph.example.test/v1.0/x?page=3"}),
            make_response({"value": []}),
        ]

        items = GraphClient(graph_session).get_all("/x", params={"$filter": "f"})

        assert items == [1, 2, 3]
        assert graph_session.http.get.call_count == 3

    def test_failure_mid_pagination_propagates(self, graph_session, make_response):
        """중간 페이지 실패 시 부분 결과 없이 예외"""
        failing = make_response(status_code=500)
        failing.raise_for_status.side_effect = requests.HTTPError("500", response=failing)
        graph_session.http.get.side_effect = [
            make_response({"value": [1], NEXT_LINK: "https://graph.example.test/v1.0/x?page=2"}),
            failing,
        ]

        with pytest.raises(RemoteUnavailableError) as exc_info:
            GraphClient(graph_session).get_all("/x")

        assert exc_info.value.status_code == 500
