"""
Postboard Server - Message API Model

Pydantic model for the {status, msg} body used by errors and simple acknowledgements.
"""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Response model for status messages"""
    status: str  # 'Error' or 'Success'
    msg: str
