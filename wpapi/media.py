"""Media library operations: upload, list and delete attachments."""

import logging
import mimetypes
from pathlib import Path

from wpapi.client import ContentType, _api_request, _expect, update
from wpapi.site import WordPressSite

logger = logging.getLogger(__name__)


def upload_media(
    site: WordPressSite,
    file_path: str | Path,
    title: str = None,
    alt_text: str = None,
) -> dict:
    """Upload a local file to the media library.

    The file goes out as a single multipart ``file`` field, and the
    Content-Disposition header names it by its basename only.
    """
    file_path = Path(file_path)
    if not file_path.is_file():
        raise FileNotFoundError(f"File not found: {file_path}")

    mime_type, _ = mimetypes.guess_type(file_path.name)
    headers = {"Content-Disposition": f'attachment; filename="{file_path.name}"'}

    with open(file_path, "rb") as f:
        files = {"file": (file_path.name, f, mime_type or "application/octet-stream")}
        response = _api_request(
            site,
            "POST",
            ContentType.MEDIA.value,
            files=files,
            headers=headers,
            timeout=site.upload_timeout,
        )
    media = _expect(response, 201)
    logger.info(f"Uploaded {file_path.name} to {site.url} as media {media.get('id')}")

    # Update title/alt if provided
    if title is not None or alt_text is not None:
        update_data = {}
        if title is not None:
            update_data["title"] = title
        if alt_text is not None:
            update_data["alt_text"] = alt_text
        media = update(site, ContentType.MEDIA, media["id"], update_data)

    return media


def list_media(site: WordPressSite, per_page: int = 10, page: int = 1) -> list[dict]:
    """Get one page of the media library."""
    response = _api_request(
        site, "GET", ContentType.MEDIA.value, params={"per_page": per_page, "page": page}
    )
    return _expect(response, 200)


def delete_media(site: WordPressSite, media_id: int, force: bool = False) -> dict:
    """Delete a media item. force=True skips the trash."""
    params = {"force": "true" if force else "false"}
    response = _api_request(site, "DELETE", f"{ContentType.MEDIA.value}/{media_id}", params=params)
    result = _expect(response, 200)
    logger.info(f"Deleted media {media_id} from {site.url} (force={force})")
    return result
