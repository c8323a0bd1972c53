"""Error handlers mapping layout engine errors to HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from woodcut.domain import InvalidInput, InvalidPiece, PieceTooLarge


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(PieceTooLarge)
    async def piece_too_large_handler(
        request: Request, exc: PieceTooLarge
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "piece_too_large",
                "details": {
                    "piece_id": exc.piece_id,
                    "effective_length": exc.effective_length,
                    "effective_width": exc.effective_width,
                },
            },
        )

    @app.exception_handler(InvalidInput)
    async def invalid_input_handler(
        request: Request, exc: InvalidInput
    ) -> JSONResponse:
        details = None
        if isinstance(exc, InvalidPiece):
            details = {"piece_id": exc.piece_id}
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "invalid_input",
                "details": details,
            },
        )
