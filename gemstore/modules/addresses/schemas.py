from pydantic import BaseModel
from typing import List


class AddressSuggestionsResponse(BaseModel):
    suggestions: List[str] = []
