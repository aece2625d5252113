from fastapi import FastAPI, HTTPException

from pdf_pages.exceptions import PDFNotFoundError

from .config import ChunkingServiceConfig
from .exceptions import InvalidInputError
from .models import ChunkRequest, ChunkResponse
from .service import ChunkingService


def create_app(config: ChunkingServiceConfig | None = None) -> FastAPI:
    service = ChunkingService(config=config or ChunkingServiceConfig.from_env())
    app = FastAPI(
        title="Chunking Service",
        version="1.0.0",
        description="Page-based chunking of extracted PDF text for quiz generation.",
    )

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.post("/chunk", response_model=ChunkResponse)
    def chunk(request: ChunkRequest) -> ChunkResponse:
        try:
            if request.pdf_path is not None:
                result = service.chunk_pdf(
                    request.document_id,
                    request.pdf_path,
                    max_tokens=request.max_tokens,
                    overlap_units=request.overlap_units,
                )
            else:
                result = service.chunk_pages(
                    request.document_id,
                    request.pages,
                    max_tokens=request.max_tokens,
                    overlap_units=request.overlap_units,
                )
            output_path = service.save(result) if request.save else None
            return ChunkResponse(
                document_id=result.document_id,
                total_chunks=result.total_chunks,
                chunks=result.chunks,
                output_path=output_path,
            )
        except InvalidInputError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except PDFNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except Exception as exc:
            raise HTTPException(status_code=500, detail=str(exc)) from exc

    return app


app = create_app()
