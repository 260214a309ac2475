class ChatApiError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ChatApiError):
    status_code = 400


class NotFoundError(ChatApiError):
    status_code = 404


class InternalError(ChatApiError):
    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
