"""WordPress REST API client.

Supports:
- Posts, Pages and Media CRUD against /wp-json/wp/v2/
- Whole-collection retrieval across X-WP-TotalPages pages
- Connection check for the authenticated user

Every operation takes the ``WordPressSite`` it talks to as its first
argument and sends exactly one request per page; nothing is cached or
retried.
"""

import logging
from enum import Enum
from typing import Any

import requests

from wpapi.errors import PaginationError, RequestError, TransportError, WordPressError
from wpapi.site import WordPressSite

logger = logging.getLogger(__name__)

MAX_PER_PAGE = 100  # Highest per_page WordPress accepts
TOTAL_PAGES_HEADER = "X-WP-TotalPages"

JSON_HEADERS = {"Accept": "application/json"}


class ContentType(str, Enum):
    POSTS = "posts"
    PAGES = "pages"
    MEDIA = "media"


def _content_type(content_type: ContentType | str) -> ContentType:
    try:
        return ContentType(content_type)
    except ValueError:
        allowed = ", ".join(t.value for t in ContentType)
        raise ValueError(f"Unknown content type: {content_type}. Available: {allowed}") from None


def _endpoint(content_type: ContentType | str, item_id: int | None = None) -> str:
    path = _content_type(content_type).value
    if item_id is not None:
        path = f"{path}/{item_id}"
    return path


def _api_request(
    site: WordPressSite,
    method: str,
    endpoint: str,
    data: dict = None,
    params: dict = None,
    files: dict = None,
    headers: dict = None,
    timeout: float = None,
) -> requests.Response:
    """Send one authenticated request and return the raw response."""
    url = f"{site.api_root}/{endpoint}"
    request_headers = {**site.headers, **JSON_HEADERS, **(headers or {})}
    timeout = timeout or site.timeout

    logger.debug(f"WordPress {method} {url}")
    try:
        if method == "GET":
            response = requests.get(url, headers=request_headers, params=params, timeout=timeout)
        elif method == "POST":
            if files:
                response = requests.post(
                    url, headers=request_headers, params=params, files=files, timeout=timeout
                )
            else:
                request_headers["Content-Type"] = "application/json"
                response = requests.post(
                    url, headers=request_headers, params=params, json=data, timeout=timeout
                )
        elif method == "PUT":
            request_headers["Content-Type"] = "application/json"
            response = requests.put(
                url, headers=request_headers, params=params, json=data, timeout=timeout
            )
        elif method == "DELETE":
            response = requests.delete(url, headers=request_headers, params=params, timeout=timeout)
        else:
            raise ValueError(f"Unsupported method: {method}")
    except requests.exceptions.RequestException as e:
        raise TransportError(f"WordPress request failed: {method} {url}: {e}") from e

    return response


def _expect(response: requests.Response, status: int) -> Any:
    """Decode the body if the status is the expected one, else raise RequestError."""
    if response.status_code != status:
        raise RequestError(response.status_code, response.text)
    if not response.content:
        return {}
    try:
        return response.json()
    except ValueError as e:
        # Login pages and security plugins answer 200 with HTML
        raise RequestError(response.status_code, response.text) from e


# ============ Content CRUD ============

def fetch(
    site: WordPressSite,
    content_type: ContentType | str,
    item_id: int = None,
    params: dict = None,
) -> dict | list[dict]:
    """Get one item by ID, or the first page of the collection when no ID is given."""
    response = _api_request(site, "GET", _endpoint(content_type, item_id), params=params)
    return _expect(response, 200)


def create(site: WordPressSite, content_type: ContentType | str, data: dict) -> dict:
    """Create an item. The server decides which fields are required."""
    response = _api_request(site, "POST", _endpoint(content_type), data=data)
    return _expect(response, 201)


def update(site: WordPressSite, content_type: ContentType | str, item_id: int, data: dict) -> dict:
    """Update some or all fields of an existing item."""
    response = _api_request(site, "PUT", _endpoint(content_type, item_id), data=data)
    return _expect(response, 200)


def delete(site: WordPressSite, content_type: ContentType | str, item_id: int) -> dict:
    """Delete an item. Trash vs. permanent deletion is up to the server."""
    response = _api_request(site, "DELETE", _endpoint(content_type, item_id))
    result = _expect(response, 200)
    logger.info(f"Deleted {_content_type(content_type).value} {item_id} from {site.url}")
    return result


# ============ Pagination ============

def _total_pages(response: requests.Response) -> int:
    raw = response.headers.get(TOTAL_PAGES_HEADER)
    if raw is None:
        raise PaginationError(f"Response has no {TOTAL_PAGES_HEADER} header")
    try:
        return int(raw)
    except ValueError:
        raise PaginationError(f"Invalid {TOTAL_PAGES_HEADER} header: {raw!r}") from None


def fetch_all(
    site: WordPressSite,
    content_type: ContentType | str,
    per_page: int = MAX_PER_PAGE,
) -> list[dict]:
    """Get every item of a collection, following X-WP-TotalPages.

    Page 1 doubles as the probe that reports the page count. Items are
    returned in page order. Any failed page aborts the whole call; no
    partial result is returned.
    """
    endpoint = _endpoint(content_type)

    first = _api_request(site, "GET", endpoint, params={"per_page": per_page, "page": 1})
    items = _expect(first, 200)
    total_pages = _total_pages(first)
    if total_pages == 0:
        return []

    results = list(items)
    for page in range(2, total_pages + 1):
        response = _api_request(site, "GET", endpoint, params={"per_page": per_page, "page": page})
        results.extend(_expect(response, 200))

    logger.debug(f"Fetched {len(results)} {endpoint} across {total_pages} pages")
    return results


# ============ Posts ============

def get_posts(site: WordPressSite, per_page: int = 10, page: int = 1, **params) -> list[dict]:
    """Get one page of posts."""
    return fetch(site, ContentType.POSTS, params={"per_page": per_page, "page": page, **params})


def get_all_posts(site: WordPressSite) -> list[dict]:
    return fetch_all(site, ContentType.POSTS)


def get_post(site: WordPressSite, post_id: int) -> dict:
    return fetch(site, ContentType.POSTS, post_id)


def create_post(site: WordPressSite, title: str, content: str, status: str = "draft", **fields) -> dict:
    """Create a new post."""
    data = {"title": title, "content": content, "status": status, **fields}
    return create(site, ContentType.POSTS, data)


def update_post(site: WordPressSite, post_id: int, **fields) -> dict:
    return update(site, ContentType.POSTS, post_id, fields)


def delete_post(site: WordPressSite, post_id: int) -> dict:
    return delete(site, ContentType.POSTS, post_id)


# ============ Pages ============

def get_pages(site: WordPressSite, per_page: int = 10, page: int = 1, **params) -> list[dict]:
    """Get one page of pages."""
    return fetch(site, ContentType.PAGES, params={"per_page": per_page, "page": page, **params})


def get_all_pages(site: WordPressSite) -> list[dict]:
    return fetch_all(site, ContentType.PAGES)


def get_page(site: WordPressSite, page_id: int) -> dict:
    return fetch(site, ContentType.PAGES, page_id)


def create_page(site: WordPressSite, title: str, content: str, status: str = "draft", **fields) -> dict:
    """Create a new page."""
    data = {"title": title, "content": content, "status": status, **fields}
    return create(site, ContentType.PAGES, data)


def update_page(site: WordPressSite, page_id: int, **fields) -> dict:
    return update(site, ContentType.PAGES, page_id, fields)


def delete_page(site: WordPressSite, page_id: int) -> dict:
    return delete(site, ContentType.PAGES, page_id)


# ============ Site ============

def test_connection(site: WordPressSite) -> dict:
    """Test the credentials by fetching the authenticated user."""
    try:
        response = _api_request(site, "GET", "users/me")
        user_data = _expect(response, 200)
    except WordPressError as e:
        return {"success": False, "url": site.url, "error": str(e)}

    return {
        "success": True,
        "url": site.url,
        "connected_as": user_data.get("name", "Unknown"),
        "roles": user_data.get("roles", []),
    }
