import httpx
from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse

from config import logger
from middleware.context import request_id_headers
from .client import EvaluatorClient
from .render import render_page
from .state import ClaimSubmission

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    submission = ClaimSubmission()
    return HTMLResponse(render_page(submission, request.app.state.leaderboard))


@router.post("/", response_class=HTMLResponse)
async def submit_claim(request: Request, claim: str = Form("")):
    """Runs one submission cycle against this app's own /api/factcheck."""
    settings = request.app.state.settings
    transport = httpx.ASGITransport(app=request.app)
    async with httpx.AsyncClient(
        transport=transport,
        base_url=settings.EVALUATOR_BASE_URL,
        headers=request_id_headers(),
    ) as http_client:
        submission = ClaimSubmission(client=EvaluatorClient(http_client))
        displayed = await submission.submit(claim)

    logger.info(f"Submission finished in state {submission.state.value} (displayed={displayed})")
    return HTMLResponse(render_page(submission, request.app.state.leaderboard))
