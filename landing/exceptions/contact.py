from fastapi import status

from .api_exception import APIException


class MissingFieldsError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Missing required fields"
    description = "Name, email and message are required."


class InvalidEmailFormatError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid email format"
    description = "The email address is not of the form `local@domain.tld`."


class CouldNotSendMessageError(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Failed to send email"
    description = "The email provider rejected the message. `details` contains the provider's error."
