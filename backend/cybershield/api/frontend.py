"""
Frontend catch-all route.

WHAT: Serves static frontend assets and falls back to the single-page
application's index.html for every other GET.

WHY: The frontend does client-side routing, so deep links such as
/services/pentest must return the SPA entry document. Unknown paths under
the API prefix get a JSON 404 instead, so API clients never receive HTML.

This router must be included last: its path pattern matches everything.
"""

from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import FileResponse

from cybershield.core.config import Settings
from cybershield.core.deps import get_app_settings
from cybershield.core.exceptions import ApiEndpointNotFoundError, NotFoundError


router = APIRouter(include_in_schema=False)


def is_api_path(path: str, api_prefix: str) -> bool:
    prefix = api_prefix.rstrip("/")
    return path == prefix or path.startswith(prefix + "/")


def resolve_static_file(frontend_dir: Path, relative_path: str) -> Optional[Path]:
    """
    Map a request path to a file inside frontend_dir.

    Returns:
        The file path, or None if it does not exist or would escape
        frontend_dir (e.g. via "..")
    """
    if not relative_path:
        return None
    root = frontend_dir.resolve()
    candidate = (root / relative_path).resolve()
    if not candidate.is_relative_to(root):
        return None
    if not candidate.is_file():
        return None
    return candidate


@router.get("/{full_path:path}")
async def serve_frontend(
    full_path: str,
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> FileResponse:
    """
    Serve a static asset or the SPA entry document.

    Raises:
        ApiEndpointNotFoundError: 404 for unmatched paths under the API prefix
        NotFoundError: 404 when the SPA entry document is missing
    """
    if is_api_path(request.url.path, settings.API_PREFIX):
        raise ApiEndpointNotFoundError()

    asset = resolve_static_file(Path(settings.FRONTEND_DIR), full_path)
    if asset is not None:
        return FileResponse(asset)

    entry = Path(settings.frontend_entry_file)
    if not entry.is_file():
        raise NotFoundError("Frontend entry document not found", path=str(request.url.path))
    return FileResponse(entry)
