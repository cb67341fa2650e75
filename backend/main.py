"""Main entry point for Ohara AI backend API."""
import logging
import time
import tiktoken
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from config import (
    CORS_ORIGINS, DOCS_DIRECTORY, GROQ_API_KEY, LOG_FORMAT, LOG_LEVEL,
    PERSONA, PORT, TOP_K
)
from logger import setup_logging
from models.api import ChatRequest, ChatResponse, ResponseMetadata, TokenUsage, UsedChunk
from services.chunking_engine import ChunkingEngine
from services.document_loader import DocumentLoader
from services.index_builder import IndexBuilder, IndexStore
from services.language_detector import LanguageDetector
from services.llm_client import LLMClient, LLMClientError
from services.persona import Persona, get_persona
from services.retrieval_engine import RetrievalEngine

# Initialize logging
logger = logging.getLogger(__name__)

SERVICE_NAME = "ohara-ai-backend"
VERSION = "1.0.0"

# Initialize FastAPI app
app = FastAPI(
    title="Ohara AI Backend",
    description="Multilingual question answering over local documents",
    version=VERSION
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# The index handle exists from import time; it is filled in on startup
index_store = IndexStore()

# Initialize services (will be done on startup)
retrieval_engine: RetrievalEngine = RetrievalEngine(index_store)
language_detector: LanguageDetector = LanguageDetector()
persona: Persona = None
llm_client: LLMClient = None
tiktoken_encoder = None


@app.on_event("startup")
async def startup_event():
    """Build the index and initialize services before accepting requests."""
    global persona, llm_client, tiktoken_encoder

    setup_logging(LOG_LEVEL, LOG_FORMAT)
    logger.info("Initializing Ohara AI backend services...")

    if not GROQ_API_KEY:
        logger.critical("GROQ_API_KEY environment variable is not set")
        raise RuntimeError("GROQ_API_KEY environment variable is not set")

    try:
        # Initialize tiktoken encoder for prompt size estimates
        tiktoken_encoder = tiktoken.get_encoding("o200k_base")
        logger.info("Initialized tiktoken encoder (o200k_base)")

        persona = get_persona(PERSONA)
        logger.info(f"Selected persona: {persona.name}")

        llm_client = LLMClient()
        logger.info("Initialized LLMClient")

        builder = IndexBuilder(DocumentLoader(DOCS_DIRECTORY), ChunkingEngine())
        index = index_store.build_index(builder)
        logger.info(f"Index ready: {len(index)} chunks from {len(index.files)} files")

        logger.info("All services initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize services: {e}", exc_info=True)
        raise


@app.get("/", response_class=PlainTextResponse)
async def root():
    """Liveness check."""
    return f"{SERVICE_NAME} is up. Send questions with POST /chat."


@app.get("/health")
async def health():
    """Detailed health check."""
    return {
        "status": "healthy" if index_store.ready else "starting",
        "service": SERVICE_NAME,
        "version": VERSION,
        "index_ready": index_store.ready,
        "chunks": len(index_store.index)
    }


@app.post("/chat", response_model=ChatResponse)
async def chat_endpoint(request: ChatRequest) -> ChatResponse:
    """
    Answer a question using retrieved document chunks as context.

    1. Detect the question's language
    2. Retrieve the top-K chunks by token overlap
    3. Build the persona prompt for that language
    4. Generate the answer with the LLM

    Args:
        request: ChatRequest with the question

    Returns:
        ChatResponse with answer, language, used chunks and metadata, or a
        500 JSONResponse {"error", "detail"} for anything unexpected

    Raises:
        HTTPException: 400 for an empty question, 503 before the index is
            built or when generation fails
    """
    start_time = time.time()

    question = (request.question or "").strip()
    if not question:
        raise HTTPException(status_code=400, detail={"error": "The question field cannot be empty."})

    if not index_store.ready:
        raise HTTPException(
            status_code=503,
            detail={"error": {"code": "INDEX_NOT_READY", "message": "Index is still being built."}}
        )

    try:
        logger.info(f"Processing question: {question[:100]}...")

        language = language_detector.detect(question)

        relevant = retrieval_engine.retrieve(question, top_k=TOP_K)

        prompt = persona.build_prompt(question, language, relevant)
        prompt_tokens = len(tiktoken_encoder.encode(prompt))

        llm_response = llm_client.generate(
            prompt=prompt,
            system_prompt=persona.system_prompt
        )

        total_latency_ms = int((time.time() - start_time) * 1000)

        response = ChatResponse(
            answer=llm_response.text,
            language=language,
            used_chunks=[UsedChunk(source=r.source, score=r.score) for r in relevant],
            metadata=ResponseMetadata(
                model_used=llm_response.model_used,
                persona=persona.name,
                tokens=TokenUsage(
                    input=llm_response.tokens_input,
                    output=llm_response.tokens_output
                ),
                prompt_tokens=prompt_tokens,
                latency_ms=total_latency_ms,
                chunks_retrieved=len(relevant)
            )
        )

        logger.info(f"Question answered in {total_latency_ms}ms ({language}, {len(relevant)} chunks)")
        return response

    except LLMClientError as e:
        logger.error(f"LLM client error: {e.error.message}")
        raise HTTPException(
            status_code=503,
            detail={
                "error": {
                    "code": e.error.code,
                    "message": e.error.message,
                    "details": e.error.details
                }
            }
        )
    except Exception as e:
        logger.error(f"Unexpected error processing question: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Server error", "detail": str(e)}
        )


if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting Ohara AI backend on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
