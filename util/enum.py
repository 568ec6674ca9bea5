import enum


class UserRole(str, enum.Enum):
    """Defines the role of a caller in the system."""

    user = "user"
    admin = "admin"


class SubmissionStatus(str, enum.Enum):
    """Lifecycle label an admin sets on a contact submission."""

    new = "new"
    read = "read"
    replied = "replied"


# Presentation maps must stay exhaustive over SubmissionStatus
STATUS_LABELS = {
    SubmissionStatus.new: "Novo",
    SubmissionStatus.read: "Lido",
    SubmissionStatus.replied: "Respondido",
}

STATUS_COLORS = {
    SubmissionStatus.new: "blue",
    SubmissionStatus.read: "yellow",
    SubmissionStatus.replied: "green",
}


def status_label(status: SubmissionStatus) -> str:
    return STATUS_LABELS[SubmissionStatus(status)]


def status_color(status: SubmissionStatus) -> str:
    return STATUS_COLORS[SubmissionStatus(status)]
