from typing import Optional
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from config import Settings, check_api_keys_on_startup, logger
from exceptions import BadRequestException, TruthBeaconException
from middleware.context import RequestContextMiddleware, get_request_id
from models.requests import ErrorResponse, FactCheckRequest
from services.evaluator import ClaimEvaluator
from ui.leaderboard import make_leaderboard
from ui.routes import router as ui_router

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing or invalid prompt"},
    500: {"model": ErrorResponse, "description": "Provider failure or unusable model output"},
}


def get_evaluator(request: Request) -> ClaimEvaluator:
    return request.app.state.evaluator


async def truthbeacon_exception_handler(request: Request, exc: TruthBeaconException):
    logger.error(
        "%s on %s: %s",
        exc.__class__.__name__,
        request.url.path,
        exc.message,
        extra={"request_id": get_request_id(), "exception": exc.to_dict()}
    )
    body = ErrorResponse(error=exc.public_message)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(title="Truth Beacon")
    app.state.settings = settings
    app.state.evaluator = ClaimEvaluator(settings)
    app.state.leaderboard = make_leaderboard()

    @app.on_event("startup")
    async def startup_event():
        check_api_keys_on_startup(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)
    app.add_exception_handler(TruthBeaconException, truthbeacon_exception_handler)

    @app.get("/health")
    async def health_check():
        return {"status": "ok", "message": "Truth Beacon is running."}

    @app.post("/api/factcheck", responses=ERROR_RESPONSES)
    async def factcheck(request: Request, evaluator: ClaimEvaluator = Depends(get_evaluator)):
        """Scores a single claim. Body: {"prompt": "<claim>"}."""
        try:
            body = await request.json()
        except ValueError:
            raise BadRequestException("body is not valid JSON")

        try:
            fact_check_request = FactCheckRequest.model_validate(body)
        except ValidationError as e:
            raise BadRequestException(f"{e.error_count()} validation error(s) in request body")

        payload = await evaluator.evaluate(fact_check_request.prompt)
        return JSONResponse(content=payload)

    app.include_router(ui_router)
    return app


app = create_app()
