"""
GET /sister?name=... -- The personalized greeting page.

The name comes straight from the link that was shared, so any casing or
stray spaces still find the page. Unknown names get the "not found" page
with a 404 status.
"""

from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse

from greetings.pages import render_greeting_page, render_not_found_page

router = APIRouter()


@router.get("/sister", response_class=HTMLResponse, include_in_schema=False)
async def sister_page(
    request: Request,
    name: str | None = Query(default=None, description="Whose page to show."),
) -> HTMLResponse:
    record = await request.app.state.lookup.find(name) if name else None

    if record is None:
        return HTMLResponse(render_not_found_page(name), status_code=404)

    return HTMLResponse(render_greeting_page(record))
