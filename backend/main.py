from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from functools import lru_cache
from pydantic import BaseModel
from typing import Any, Dict, Optional
import logging

import openai
from openai import OpenAI

from promptarch.config import DEFAULT_MAX_OUTPUT_TOKENS, get_completion_config

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("api")

app = FastAPI(
    title="Prompt Architecture Transport",
    description="Forwards completion requests to the model provider with the server-held credential",
    version="1.0.0"
)

# Configure CORS
origins = [
    "http://localhost:3000",
    "http://localhost:5173",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

# --- Models ---

class GenerateRequest(BaseModel):
    system: Optional[str] = ""
    prompt: Optional[str] = None
    max_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS

class GenerateResponse(BaseModel):
    content: str
    usage: Optional[Dict[str, Any]] = None
    model: str

# --- Provider ---

class TransportConfigError(Exception):
    """Raised when the server-side provider credential or settings are unusable."""

@app.exception_handler(TransportConfigError)
async def transport_config_error_handler(request: Request, exc: TransportConfigError):
    logger.error(f"Transport misconfigured: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "Failed to generate response", "details": str(exc)},
    )

def _completion_config():
    try:
        return get_completion_config()
    except (RuntimeError, ValueError) as e:
        raise TransportConfigError(str(e)) from e

@lru_cache(maxsize=1)
def get_provider_client() -> OpenAI:
    cfg = _completion_config()
    if not cfg.api_key:
        raise TransportConfigError("OPENAI_API_KEY must be set for the transport endpoint")
    return OpenAI(api_key=cfg.api_key, base_url=cfg.api_base)

def get_model_name() -> str:
    return _completion_config().model_name

# --- Endpoints ---

@app.post("/api/generate", response_model=GenerateResponse)
def generate(
    request: GenerateRequest,
    client: OpenAI = Depends(get_provider_client),
    model_name: str = Depends(get_model_name),
):
    """Run one completion and return its text, usage and model name."""
    if not request.prompt or not request.prompt.strip():
        return JSONResponse(status_code=400, content={"error": "Missing prompt in request body"})

    try:
        response = client.chat.completions.create(
            model=model_name,
            max_tokens=request.max_tokens,
            messages=[
                {"role": "system", "content": request.system or ""},
                {"role": "user", "content": request.prompt},
            ],
        )
    except openai.AuthenticationError:
        logger.error("Provider rejected the API key")
        return JSONResponse(status_code=401, content={"error": "Invalid API key"})
    except openai.RateLimitError:
        logger.warning("Provider rate limit hit")
        return JSONResponse(status_code=429, content={"error": "Rate limit exceeded"})
    except openai.OpenAIError as e:
        logger.error(f"Provider call failed: {e}")
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to generate response", "details": str(e)},
        )

    content = "\n".join(
        choice.message.content for choice in response.choices if choice.message.content
    )
    usage = response.usage.model_dump() if response.usage is not None else None
    return {"content": content, "usage": usage, "model": response.model}
