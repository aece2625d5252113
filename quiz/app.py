from fastapi import FastAPI, HTTPException

from .config import QuizConfig
from .exceptions import QuizError
from .models import QuizRequest, QuizResponse
from .service import QuizService


def create_app(config: QuizConfig | None = None, service: QuizService | None = None) -> FastAPI:
    service = service or QuizService(config=config)
    app = FastAPI(
        title="Chunk Quiz Service",
        version="1.0.0",
        description="Quiz generation for a single document chunk via OpenAI.",
    )

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.post("/quiz", response_model=QuizResponse)
    def quiz(request: QuizRequest) -> QuizResponse:
        try:
            return service.generate(request)
        except QuizError as exc:
            raise HTTPException(status_code=502, detail=str(exc)) from exc
        except Exception as exc:
            raise HTTPException(status_code=500, detail=str(exc)) from exc

    return app


app = create_app()
