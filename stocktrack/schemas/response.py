from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Plain acknowledgement body for deletes and logout."""
    message: str
