from typing import Optional


class UserError(Exception):
    """
    A rejection meant for the person filling in the form.

    `code` is stable for branching in code and tests; `message`, `info` and
    `suggestion` are shown to the user as-is.
    """

    def __init__(
        self,
        message: str,
        info: Optional[str] = None,
        suggestion: Optional[str] = None,
        code: str = "user_error",
    ):
        super().__init__(message)
        self.message = message
        self.info = info
        self.suggestion = suggestion
        self.code = code

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "info": self.info,
            "suggestion": self.suggestion,
        }
