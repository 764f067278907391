import sentry_sdk


class RequestError(Exception):
    """Raised when the HubSpot API answers with an error status"""

    def __init__(self, message: str, status: int | None = None, detail=None, event_id=None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.detail = detail
        self.event_id = event_id


class HubDBError(Exception):
    """Failure of a HubDB operation, only carries the message of the underlying error"""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def error_message(title: str, detail: str | dict | None) -> str:
    # HubSpot error bodies look like {"status": "error", "message": "...", ...}
    if isinstance(detail, dict) and detail.get("message"):
        return str(detail["message"])
    if isinstance(detail, str) and detail:
        return detail
    return title


def handle_exception(
    status: int, title: str, detail: str | dict | None, table_id: str | int | None = None
):
    """Handle API errors with Sentry integration."""
    event_id = None
    message = error_message(title, detail)
    if sentry_sdk.get_client().is_active():
        with sentry_sdk.new_scope() as scope:
            sentry_tags: dict = {
                "status": status,
                "title": title,
            }
            if table_id is not None:
                sentry_tags["table_id"] = table_id
            scope.set_tags(sentry_tags)
            scope.set_extra("detail", detail)
            event_id = sentry_sdk.capture_exception(Exception(message))
    raise RequestError(message, status=status, detail=detail, event_id=event_id)
