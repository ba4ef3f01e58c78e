from fastapi import Depends, FastAPI, Form, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import httpx
import logging

from config import CORS_ORIGINS, LOG_LEVEL, PROXY_URL
from landing import render_landing
from models import SubmissionAccepted, SubmissionError, WaitlistSubmission
from upstream import forward_submission, get_upstream_client, get_upstream_url
from waitlist_form import WaitlistForm

logging.basicConfig(level=LOG_LEVEL)

# ========== FastAPI App Setup ==========
app = FastAPI(title="AI Restaurant Review Manager")
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


# ========== Errors ==========
class WaitlistProxyError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


@app.exception_handler(WaitlistProxyError)
async def waitlist_proxy_error_handler(request: Request, exc: WaitlistProxyError):
    return JSONResponse(
        status_code=exc.status_code,
        content=SubmissionError(error=exc.message).model_dump(),
    )


# ========== Proxy Client for the Landing Form ==========
def get_proxy_client(request: Request) -> httpx.AsyncClient:
    if PROXY_URL:
        return httpx.AsyncClient(base_url=PROXY_URL, timeout=None)
    return httpx.AsyncClient(
        transport=httpx.ASGITransport(app=request.app),
        base_url="http://landing",
        timeout=None,
    )


# ========== Endpoints ==========

@app.get("/")
async def landing_page(request: Request):
    return render_landing(request, WaitlistForm())


@app.post("/")
async def landing_submit(request: Request, email: str = Form("")):
    async with get_proxy_client(request) as client:
        form = WaitlistForm(client)
        await form.submit(email)
        return render_landing(request, form)


@app.post("/api/add_emails", response_model=SubmissionAccepted)
async def add_emails(
    request: Request,
    client: httpx.AsyncClient = Depends(get_upstream_client),
    upstream_url: str = Depends(get_upstream_url),
):
    try:
        submission = WaitlistSubmission.model_validate(await request.json())

        response = await forward_submission(client, upstream_url, submission)
        response_data = response.json()

        if response.status_code == 200:
            logging.info("Waitlist submission accepted for project %s", submission.project_name)
            return SubmissionAccepted()
        if response.status_code == 422:
            detail = response_data.get("detail") if isinstance(response_data, dict) else None
            if detail and not isinstance(detail, str):
                detail = str(detail)
            raise WaitlistProxyError(422, detail or "Invalid email format")
        raise RuntimeError(f"Upstream returned status {response.status_code}")

    except WaitlistProxyError:
        raise
    except Exception:
        logging.exception("Error in add_emails API:")
        raise WaitlistProxyError(500, "Failed to submit email")


@app.get("/health")
def health():
    return {"status": "ok"}
