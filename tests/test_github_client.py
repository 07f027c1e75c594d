"""GitHub 클라이언트 테스트"""

import base64
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from profileprism.infra.github.client import (
    _get_headers,
    _has_next_page,
    get_authenticated_user,
    get_file_content,
    list_user_repos,
)


def _response(status_code: int, json_data=None, headers: dict | None = None) -> httpx.Response:
    return httpx.Response(
        status_code,
        json=json_data,
        headers=headers,
        request=httpx.Request("GET", "https://api.github.com"),
    )


class TestGetHeaders:
    """_get_headers 함수 테스트"""

    def test_with_token(self):
        """토큰이 있으면 Authorization 헤더 포함"""
        headers = _get_headers("gho_test")
        assert headers["Authorization"] == "Bearer gho_test"
        assert headers["Accept"] == "application/vnd.github.v3+json"

    def test_without_token(self):
        """토큰이 없으면 Authorization 헤더 없음"""
        assert "Authorization" not in _get_headers(None)


class TestHasNextPage:
    """_has_next_page 함수 테스트"""

    @pytest.mark.parametrize(
        "link,expected",
        [
            ('<https://api.github.com/user/repos?page=2>; rel="next"', True),
            ('<https://api.github.com/user/repos?page=1>; rel="prev"', False),
            (None, False),
        ],
        ids=["next", "prev_only", "no_header"],
    )
    def test_link_header(self, link, expected):
        """Link 헤더의 rel="next" 여부 확인"""
        headers = {"Link": link} if link else None
        assert _has_next_page(_response(200, [], headers)) is expected


class TestGetAuthenticatedUser:
    """get_authenticated_user 함수 테스트"""

    @pytest.mark.asyncio
    async def test_returns_user(self):
        """/user 응답 반환"""
        with patch("profileprism.infra.github.client._client") as mock_client:
            mock_client.get = AsyncMock(return_value=_response(200, {"login": "janedev"}))

            result = await get_authenticated_user("gho_test")

        assert result == {"login": "janedev"}
        assert mock_client.get.call_args.args[0].endswith("/user")

    @pytest.mark.asyncio
    async def test_unauthorized_raises(self):
        """401 응답이면 HTTPStatusError"""
        with patch("profileprism.infra.github.client._client") as mock_client:
            mock_client.get = AsyncMock(return_value=_response(401, {"message": "Bad credentials"}))

            with pytest.raises(httpx.HTTPStatusError):
                await get_authenticated_user("bad")


class TestListUserRepos:
    """list_user_repos 함수 테스트"""

    @pytest.mark.asyncio
    async def test_follows_pagination(self):
        """rel="next"가 없을 때까지 페이지를 순서대로 요청"""
        first = _response(
            200,
            [{"name": "a"}, {"name": "b"}],
            {"Link": '<https://api.github.com/user/repos?page=2>; rel="next"'},
        )
        second = _response(200, [{"name": "c"}])

        with patch("profileprism.infra.github.client._client") as mock_client:
            mock_client.get = AsyncMock(side_effect=[first, second])

            result = await list_user_repos("gho_test")

        assert [r["name"] for r in result] == ["a", "b", "c"]
        assert mock_client.get.call_count == 2
        pages = [call.kwargs["params"]["page"] for call in mock_client.get.call_args_list]
        assert pages == [1, 2]

    @pytest.mark.asyncio
    async def test_single_page_request(self):
        """다음 페이지가 없으면 한 번만 요청"""
        with patch("profileprism.infra.github.client._client") as mock_client:
            mock_client.get = AsyncMock(return_value=_response(200, [{"name": "a"}]))

            result = await list_user_repos("gho_test")

        assert len(result) == 1
        mock_client.get.assert_called_once()
        params = mock_client.get.call_args.kwargs["params"]
        assert params["per_page"] == 100
        assert params["sort"] == "updated"

    @pytest.mark.asyncio
    async def test_per_page_capped(self):
        """페이지 크기는 최대 100"""
        with patch("profileprism.infra.github.client._client") as mock_client:
            mock_client.get = AsyncMock(return_value=_response(200, []))

            await list_user_repos("gho_test", per_page=500)

        assert mock_client.get.call_args.kwargs["params"]["per_page"] == 100

    @pytest.mark.asyncio
    async def test_server_error_raises(self):
        """5xx 응답이면 HTTPStatusError"""
        with patch("profileprism.infra.github.client._client") as mock_client:
            mock_client.get = AsyncMock(return_value=_response(500, {}))

            with pytest.raises(httpx.HTTPStatusError):
                await list_user_repos("gho_test")


class TestGetFileContent:
    """get_file_content 함수 테스트"""

    @pytest.mark.asyncio
    async def test_decodes_base64(self):
        """base64 내용을 디코딩해서 반환"""
        encoded = base64.b64encode("# 제목\n본문".encode()).decode()
        with patch("profileprism.infra.github.client._client") as mock_client:
            mock_client.get = AsyncMock(return_value=_response(200, {"content": encoded}))

            result = await get_file_content("janedev/alpha", "README.md", "gho_test")

        assert result == "# 제목\n본문"
        assert mock_client.get.call_args.args[0].endswith("/repos/janedev/alpha/contents/README.md")

    @pytest.mark.asyncio
    async def test_not_found_returns_none(self):
        """404면 None 반환"""
        with patch("profileprism.infra.github.client._client") as mock_client:
            mock_client.get = AsyncMock(return_value=_response(404, {"message": "Not Found"}))

            result = await get_file_content("janedev/alpha", "README.md")

        assert result is None

    @pytest.mark.asyncio
    async def test_other_error_raises(self):
        """404 이외의 오류는 그대로 전파"""
        with patch("profileprism.infra.github.client._client") as mock_client:
            mock_client.get = AsyncMock(return_value=_response(403, {"message": "rate limited"}))

            with pytest.raises(httpx.HTTPStatusError):
                await get_file_content("janedev/alpha", "README.md")

    @pytest.mark.asyncio
    async def test_network_error_raises(self):
        """네트워크 오류는 RequestError로 전파"""
        with patch("profileprism.infra.github.client._client") as mock_client:
            mock_client.get = AsyncMock(side_effect=httpx.ConnectError("connection refused"))

            with pytest.raises(httpx.RequestError):
                await get_file_content("janedev/alpha", "README.md")
