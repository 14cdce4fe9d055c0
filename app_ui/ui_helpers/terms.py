"""Central UI terminology mapping for user-facing labels."""

from lab_catalog.models import OS_UBUNTU, OS_WINDOWS

PORTAL_TITLE = "Student Labs"
SEARCH_PLACEHOLDER = "Search by subject name..."
NO_MATCHES = "No matching labs found."

PULL_COMMAND = "Pull Command"
RUN_COMMAND = "Run Command"


def os_label(variant: str) -> str:
    """Return the user-facing label for an OS variant."""
    mapping = {
        OS_UBUNTU: "Ubuntu",
        OS_WINDOWS: "Windows",
    }
    return mapping.get(variant, variant)
