"""Run page extraction + chunking (+ summaries and quiz generation) in one step.

Usage:
  python run_pipeline.py --pdf path/to/file.pdf
  python run_pipeline.py --pdf path/to/file.pdf --max-tokens 700 --overlap 1 --quiz
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

try:
    from dotenv import load_dotenv
except ImportError:  # pragma: no cover
    load_dotenv = None

from chunking import ChunkingConfig, ChunkingService, ChunkingServiceConfig
from logging_config import get_logger, setup_logging
from pdf_pages import PageExtractor, PagesStorage
from quiz import QuizConfig, QuizService, QuizStorage, SummaryService

logger = get_logger("cli")


def main() -> None:
    parser = argparse.ArgumentParser(description="Run page extraction, chunking and quiz generation.")
    parser.add_argument("--pdf", required=True, help="Path to the PDF file")
    parser.add_argument("--document-id", help="Document id (default: PDF file stem)")
    parser.add_argument("--max-tokens", type=int, default=700, help="Maximum estimated tokens per chunk")
    parser.add_argument("--overlap", type=int, default=1, help="Units carried into the next chunk")
    parser.add_argument("--tokenizer", choices=["approx", "tiktoken"], default="approx")
    parser.add_argument("--data-dir", default="data", help="Root directory for pages, chunks and quizzes")
    parser.add_argument("--quiz", action="store_true", help="Summarize and generate one quiz per chunk (needs OPENAI_API_KEY)")
    parser.add_argument("--title", help="Document title passed to quiz generation")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    pdf_path = Path(args.pdf)
    if not pdf_path.exists():
        raise SystemExit(f"PDF not found: {pdf_path}")

    if load_dotenv:
        load_dotenv(Path(".env"))

    data_dir = Path(args.data_dir)
    document_id = args.document_id or pdf_path.stem

    logger.info(f"Starting page extraction for {pdf_path}")
    extractor = PageExtractor()
    document = extractor.extract_document(pdf_path)
    pages_paths = PagesStorage(str(data_dir / "pages")).save(document)

    logger.info("Starting chunking")
    service = ChunkingService(
        ChunkingServiceConfig(
            data_dir=str(data_dir / "chunking"),
            chunking=ChunkingConfig(
                max_tokens=args.max_tokens,
                overlap_units=args.overlap,
                tokenizer=args.tokenizer,
            ),
        ),
        extractor=extractor,
    )
    result = service.chunk_pages(document_id, document.pages)
    chunk_path = service.save(result)

    quiz_paths: list[Path] = []
    if args.quiz:
        quiz_config = QuizConfig.from_env()
        quiz_storage = QuizStorage(str(data_dir / "quizzes"))

        logger.info("Summarizing document")
        summarizer = SummaryService(config=quiz_config)
        page_summaries = summarizer.summarize_pages(document.pages)
        summary = summarizer.summarize_document(document.pages, page_summaries)
        quiz_storage.save_summary(document_id, summary, page_summaries)

        logger.info(f"Generating quizzes for {result.total_chunks} chunks")
        responses = QuizService(config=quiz_config).generate_for_chunks(
            result,
            document_title=args.title,
            document_summary=summary,
        )
        for response in responses:
            quiz_paths.append(quiz_storage.save(document_id, response))

    print("Done.")
    print(f"document_id: {document_id}")
    print(f"pages: {document.total_pages} -> {pages_paths.pages_file}")
    print(f"chunks: {result.total_chunks} -> {chunk_path}")
    if quiz_paths:
        print(f"quizzes: {len(quiz_paths)} -> {quiz_paths[0].parent}")


if __name__ == "__main__":
    main()
