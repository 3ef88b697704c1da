from fastapi import status

from .api_exception import APIException


class InvalidRequestBodyError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid request body"
    description = "The request body is not a JSON object of string fields."


class InternalServerError(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Internal server error"
    description = "An unexpected error occurred while processing the request."
