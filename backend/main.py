# main.py
from concurrent.futures import ThreadPoolExecutor
import traceback
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from services.ai_detector import detect_ai
from services.errors import ComputationError, InvalidInput
from utils.config import get_settings

settings = get_settings()

app = FastAPI(title="Text Origin Scorer")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


class TextPayload(BaseModel):
    text: Any = None


class TextBatch(BaseModel):
    texts: list[Any]


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


async def read_json(request: Request):
    """Parse the body as JSON whatever Content-Type the client sent."""
    try:
        return await request.json()
    except ValueError:
        return None


@app.get("/health")
def health():
    return {"status": "healthy"}


@app.post("/detect-ai-content")
async def detect_ai_content(request: Request):
    body = await read_json(request)
    try:
        payload = TextPayload.model_validate(body)
        result = detect_ai(payload.text, settings)
    except (ValidationError, InvalidInput) as e:
        print(f"[detect_ai_content] Invalid input ({type(e).__name__})")
        return error_response(
            f"Text is required and must be at least {settings.min_text_length} characters"
            if isinstance(e, ValidationError) else str(e),
            400,
        )
    except ComputationError as e:
        return error_response(str(e), 500)
    except Exception as e:
        print(f"[detect_ai_content] EXCEPTION: {e}")
        print(traceback.format_exc())
        return error_response(str(e) or "An unexpected error occurred", 500)

    return result.to_dict(include_metrics=settings.include_metrics)


@app.post("/detect-ai-content/batch")
async def detect_ai_content_batch(request: Request):
    body = await read_json(request)
    try:
        texts = TextBatch.model_validate(body).texts
    except ValidationError as e:
        print(f"[detect_ai_content_batch] Rejected body: {e.error_count()} validation error(s)")
        return error_response("Request body must contain a list of texts", 400)

    print(f"[detect_ai_content_batch] Received {len(texts)} texts")
    if not texts:
        return error_response("At least one text is required", 400)

    def process_text(item):
        index, text = item
        try:
            record = detect_ai(text, settings).to_dict(include_metrics=settings.include_metrics)
            record["index"] = index
            return record
        except InvalidInput as e:
            return {"index": index, "error": str(e)}
        except Exception as e:
            print(f"[process_text] EXCEPTION for #{index}: {e}")
            print(traceback.format_exc())
            return {"index": index, "error": str(e)}

    with ThreadPoolExecutor(max_workers=settings.batch_workers) as executor:
        results = list(executor.map(process_text, enumerate(texts)))

    return {"results": results}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
