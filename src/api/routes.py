"""
API routes - Form and GCD computation endpoints.

This module defines the HTTP endpoints:
- GET / - Serve the GCD input form
- POST /gcd - Compute the GCD of the submitted numbers
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from src.adapters.forms import decode_form_body
from src.api.dependencies import get_gcd_service
from src.domain.exceptions import GcdInputError
from src.domain.service import GcdService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["gcd"])

FORM_PAGE = """
        <title>GCD Calculator</title>
        <form action="/gcd" method="post">
            <input type="text" name="n">
            <input type="text" name="n">
            <button type="submit">Compute GCD</button>
        </form>
    """


@router.get(
    "/",
    response_class=HTMLResponse,
    summary="GCD input form",
    description="HTML page with a form posting two 'n' fields to /gcd.",
)
async def get_form() -> HTMLResponse:
    """Serve the static input form."""
    return HTMLResponse(content=FORM_PAGE)


@router.post(
    "/gcd",
    response_class=HTMLResponse,
    responses={
        400: {
            "content": {"text/plain": {}},
            "description": "Unreadable form data, missing 'n', or an invalid 'n' value",
        },
    },
    summary="Compute the greatest common divisor",
    description="Accepts URL-encoded form data with one or more 'n' fields, "
    "each an unsigned 64-bit integer, and reports their greatest common divisor.",
)
async def post_gcd(
    request: Request,
    service: GcdService = Depends(get_gcd_service),
) -> Response:
    """
    Compute the GCD of the submitted numbers.

    - **n**: repeated field, one number per occurrence

    Every rejection is a 400 whose plain-text body names the problem.
    """
    body = await request.body()
    try:
        form_data = decode_form_body(body)
        result = service.compute(form_data)
    except GcdInputError as e:
        logger.debug("Rejected GCD submission: %s", e)
        return PlainTextResponse(f"{e}\n", status_code=status.HTTP_400_BAD_REQUEST)

    logger.debug("gcd%s = %d", result.numbers, result.divisor)
    return HTMLResponse(content=result.to_html())
