# storefront/api/routers/spa.py
import os

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse

from storefront.domain.errors import NotFoundError

router = APIRouter(tags=["spa"])

INDEX_FILE = "index.html"


def resolve_static(public_dir: str, path: str) -> str | None:
    """Plik z public_dir albo None. Sciezki wychodzace poza katalog -> None."""
    root = os.path.realpath(public_dir)
    candidate = os.path.realpath(os.path.join(root, path.lstrip("/")))
    if os.path.commonpath([root, candidate]) != root:
        return None
    if os.path.isfile(candidate):
        return candidate
    return None


#musi byc rejestrowany jako ostatni, lapie wszystko co nie pasuje do /api
@router.get("/{full_path:path}", include_in_schema=False)
def spa(full_path: str, request: Request):
    public_dir = request.app.state.public_dir

    static = resolve_static(public_dir, full_path) if full_path else None
    if static:
        return FileResponse(static)

    index = resolve_static(public_dir, INDEX_FILE)
    if not index:
        raise NotFoundError("Not found")
    return FileResponse(index)
