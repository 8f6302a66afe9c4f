"""
Pydantic schema for the error body shared by every endpoint.

Used for the OpenAPI ``responses`` declarations; the body itself is built in
``app.core.exceptions``.
"""

from datetime import datetime
from typing import Dict, Union

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    timestamp: datetime
    status: int
    error: str
    message: Union[str, Dict[str, str]]
    path: str
