"""Endpoint for the contact form"""

import re
from typing import Any

from fastapi import APIRouter

from ..exceptions.contact import CouldNotSendMessageError, InvalidEmailFormatError, MissingFieldsError
from ..exceptions.request import InternalServerError, InvalidRequestBodyError
from ..logger import get_logger
from ..schemas.contact import EMAIL_REGEX, ContactResponse, ContactSubmission
from ..services.resend import ResendError
from ..settings import settings
from ..utils.docs import responses
from ..utils.email import CONTACT_SUBMISSION


router = APIRouter(tags=["contact"])

logger = get_logger(__name__)


@router.post(
    "/contact",
    responses=responses(
        ContactResponse,
        MissingFieldsError,
        InvalidEmailFormatError,
        InvalidRequestBodyError,
        CouldNotSendMessageError,
        InternalServerError,
    ),
)
async def submit_contact_form(data: ContactSubmission) -> Any:
    """
    Send a contact form submission to the company inbox.

    `name`, `email` and `message` are required, `company` is optional.
    Each call makes exactly one delivery attempt; nothing is retried or stored.
    """

    if not (data.name and data.email and data.message):
        raise MissingFieldsError
    if not re.fullmatch(EMAIL_REGEX, data.email):
        raise InvalidEmailFormatError

    logger.debug(f"Contact form submission from {data.email}")

    try:
        result = await CONTACT_SUBMISSION.send(
            settings.contact_recipients,
            reply_to=data.email,
            name=data.name,
            email=data.email,
            company=data.company,
            message=data.message,
        )
        logger.info(f"Email sent successfully: {result.get('id')}")
    except ResendError as e:
        logger.error(f"Failed to send email: {e}")
        raise CouldNotSendMessageError(e.message)
    except Exception:
        logger.exception("Error processing contact form")
        raise InternalServerError

    return ContactResponse()
