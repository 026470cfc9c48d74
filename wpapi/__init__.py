"""WordPress REST API client - posts, pages and media over /wp-json/wp/v2/."""

from wpapi.client import (
    ContentType,

    # Generic CRUD
    fetch,
    fetch_all,
    create,
    update,
    delete,

    # Posts & Pages
    get_posts,
    get_all_posts,
    get_post,
    create_post,
    update_post,
    delete_post,
    get_pages,
    get_all_pages,
    get_page,
    create_page,
    update_page,
    delete_page,

    # Site
    test_connection,
)
from wpapi.errors import PaginationError, RequestError, TransportError, WordPressError
from wpapi.media import delete_media, list_media, upload_media
from wpapi.site import WordPressSite, basic_auth_header

__all__ = [
    "ContentType",
    "WordPressSite",
    "basic_auth_header",
    "fetch",
    "fetch_all",
    "create",
    "update",
    "delete",
    "get_posts",
    "get_all_posts",
    "get_post",
    "create_post",
    "update_post",
    "delete_post",
    "get_pages",
    "get_all_pages",
    "get_page",
    "create_page",
    "update_page",
    "delete_page",
    "upload_media",
    "list_media",
    "delete_media",
    "test_connection",
    "WordPressError",
    "RequestError",
    "TransportError",
    "PaginationError",
]
