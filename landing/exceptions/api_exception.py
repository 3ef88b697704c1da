from fastapi import HTTPException


class APIException(HTTPException):
    status_code: int
    detail: str
    description: str

    def __init__(self, details: str | None = None) -> None:
        super().__init__(self.status_code, self.detail)
        self.details = details
