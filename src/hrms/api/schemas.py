"""Response schemas shared across modules."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Plain acknowledgement returned by delete and unassign."""

    message: str
