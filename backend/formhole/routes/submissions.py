import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import HTMLResponse, PlainTextResponse
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from formhole import config
from formhole.infra.factory import get_store
from formhole.interfaces.store import ISubmissionStore
from formhole.rendering import render_page
from formhole.schemas import SubmissionCreate
from formhole.validators import FORM_CONTENT_TYPE, SubmissionValidator

logger = logging.getLogger(__name__)

router = APIRouter(tags=["submissions"])

validator = SubmissionValidator()

THANK_YOU = "Thanks for writing your message!"
SUBMIT_ERROR = "Server Error: Could not process your submission."
LIST_ERROR = "Server Error: Could not retrieve submissions."
METHOD_NOT_ALLOWED = "Method Not Allowed. Only GET and POST are supported."


async def read_form(request: Request) -> Dict[str, Any]:
    """
    Parse the URL-encoded body into field -> value.
    A field sent more than once maps to the list of its values.
    """
    form = await request.form()
    fields: Dict[str, Any] = {}
    for key, value in form.multi_items():
        if key not in fields:
            fields[key] = value
        elif isinstance(fields[key], list):
            fields[key].append(value)
        else:
            fields[key] = [fields[key], value]
    return fields


@router.post("/", response_class=PlainTextResponse)
async def create_submission(
    request: Request,
    store: ISubmissionStore = Depends(get_store)
):
    """
    Accept a guestbook entry.

    Flow:
    1. Validate content type and fields (first failing check answers 400)
    2. Store the trimmed name and message with a server timestamp
    3. Thank the caller
    """
    try:
        content_type = request.headers.get("content-type")
        form: Dict[str, Any] = {}
        if content_type and FORM_CONTENT_TYPE in content_type:
            form = await read_form(request)

        failure = validator.validate(content_type, form)
        if failure:
            logger.warning(
                f"Validation failed: {failure.reason} "
                f"(content-type={content_type!r}, fields={list(form.keys())})"
            )
            return PlainTextResponse(failure.message, status_code=400)

        submission = SubmissionCreate(
            name=form["name"].strip(),
            message=form["message"].strip(),
            timestamp=datetime.now(timezone.utc),
        )
        # Blocking database write, kept off the event loop
        submission_id = await run_in_threadpool(store.add, submission)
        logger.info(f"[{submission_id}] Submission saved successfully: {submission.name}")

        return PlainTextResponse(THANK_YOU, status_code=200)

    except Exception as e:
        logger.error(f"Error processing POST request: {e}", exc_info=True)
        return PlainTextResponse(SUBMIT_ERROR, status_code=500)


@router.get("/", response_class=HTMLResponse)
def list_submissions(store: ISubmissionStore = Depends(get_store)):
    """
    Render the most recent submissions, newest first.
    """
    try:
        submissions = store.list_recent(config.SUBMISSIONS_LIMIT)
        logger.info(f"Retrieved {len(submissions)} submissions.")
        return HTMLResponse(render_page(submissions), status_code=200)
    except Exception as e:
        logger.error(f"Error processing GET request: {e}", exc_info=True)
        return PlainTextResponse(LIST_ERROR, status_code=500)


async def method_not_allowed(request: Request, exc: StarletteHTTPException):
    """
    Answer every verb other than GET and POST on the endpoint root.
    Registered as the 405 handler; other paths keep the default response.
    """
    if request.url.path != "/":
        return await http_exception_handler(request, exc)
    logger.warning(f"Unsupported method: {request.method}")
    return PlainTextResponse(METHOD_NOT_ALLOWED, status_code=405, headers={"Allow": "GET, POST"})
