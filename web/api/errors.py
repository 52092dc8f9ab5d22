"""API errors and validation helpers."""

from app.container import Container
from app.models.sheets import TabList
from app.services.sheets import SheetLoader


class NotFoundError(Exception):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class TabNotFound(NotFoundError):
    """Requested tab is not in the spreadsheet's tab list."""

    def __init__(self, tab_name: str, available: TabList):
        self.tab_name = tab_name
        self.available = list(available)
        super().__init__(f"Tab '{tab_name}' does not exist. Available tabs: {', '.join(self.available)}")


class MissingConfigError(Exception):
    """Required configuration is missing."""

    def __init__(self, message: str = "Missing configuration"):
        self.message = message
        super().__init__(self.message)


def require_loader(container: Container) -> SheetLoader:
    """Loader for the configured sheet, or MissingConfigError."""
    if container.sheets is None:
        raise MissingConfigError("SHEET_ID is not configured in the environment.")
    return container.sheets


def validate_tab(tab_name: str, tabs: TabList) -> None:
    """Check tab_name is one of the known tabs."""
    if tab_name not in tabs:
        raise TabNotFound(tab_name, tabs)
