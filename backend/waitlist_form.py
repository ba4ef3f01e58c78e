import logging
import re
from contextlib import asynccontextmanager
from enum import Enum

import httpx

from config import PROJECT_NAME

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

PROXY_PATH = "/api/add_emails"

INVALID_EMAIL_MESSAGE = "Please enter a valid email address"
SUCCESS_MESSAGE = "Thank you for joining our waitlist!"
FAILED_MESSAGE = "Failed to submit email. Please try again."
GENERIC_MESSAGE = "Something went wrong. Please try again."


class FormState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class FormEvent(str, Enum):
    SUBMIT = "submit"
    INVALID = "invalid"
    RESOLVED = "resolved"
    REJECTED = "rejected"


_SETTLED = (FormState.IDLE, FormState.SUCCEEDED, FormState.FAILED)

TRANSITIONS = {
    **{(s, FormEvent.SUBMIT): FormState.SUBMITTING for s in _SETTLED},
    **{(s, FormEvent.INVALID): FormState.FAILED for s in _SETTLED},
    (FormState.SUBMITTING, FormEvent.RESOLVED): FormState.SUCCEEDED,
    (FormState.SUBMITTING, FormEvent.REJECTED): FormState.FAILED,
}


class InvalidTransition(Exception):
    def __init__(self, state: FormState, event: FormEvent):
        super().__init__(f"Cannot apply '{event.value}' in state '{state.value}'")
        self.state = state
        self.event = event


class FormBusy(Exception):
    pass


class SubmissionRejected(Exception):
    pass


def validate_email(email: str | None) -> bool:
    if not email:
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


class WaitlistForm:
    """
    Email capture form for the landing page.

    Holds the form's UI state and talks to the proxy with an httpx client
    whose base_url points at it. One submission may be in flight at a time.
    A form built without a client is only rendered, never submitted.
    """

    def __init__(self, client: httpx.AsyncClient | None = None, project_name: str = PROJECT_NAME):
        self.client = client
        self.project_name = project_name
        self.state = FormState.IDLE
        self.message: str | None = None
        self.value = ""
        self.locked = False

    @property
    def disabled(self) -> bool:
        return self.locked

    def _apply(self, event: FormEvent, message: str | None = None) -> FormState:
        try:
            self.state = TRANSITIONS[(self.state, event)]
        except KeyError:
            raise InvalidTransition(self.state, event) from None
        self.message = message
        return self.state

    @asynccontextmanager
    async def _ui_lock(self):
        self.locked = True
        self._apply(FormEvent.SUBMIT)
        try:
            yield
        finally:
            self.locked = False

    async def submit(self, email: str) -> FormState:
        if self.locked:
            raise FormBusy("A submission is already in flight")

        self.value = email
        if not validate_email(email):
            return self._apply(FormEvent.INVALID, INVALID_EMAIL_MESSAGE)

        payload = {"project_name": self.project_name, "email": email}
        logging.debug("Sending payload: %s", payload)

        async with self._ui_lock():
            try:
                response = await self.client.post(PROXY_PATH, json=payload)
                if not response.is_success:
                    raise SubmissionRejected(_error_from(response))
            except SubmissionRejected as e:
                return self._apply(FormEvent.REJECTED, str(e))
            except Exception:
                logging.exception("Waitlist submission failed:")
                return self._apply(FormEvent.REJECTED, GENERIC_MESSAGE)

            self.value = ""
            return self._apply(FormEvent.RESOLVED, SUCCESS_MESSAGE)


def _error_from(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return FAILED_MESSAGE
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return FAILED_MESSAGE
