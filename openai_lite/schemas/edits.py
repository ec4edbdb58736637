# Edits. Deprecated upstream in favour of chat; kept for older models.
# See https://platform.openai.com/docs/api-reference/edits
from typing import List, Optional

from openai_lite.schemas.base import APIObject, Arguments


class EditArguments(Arguments):
    """
    Request arguments for edits.

        EditArguments(
            model="text-davinci-edit-001",
            input="The quick brown fox",
            instruction="Complete this sentence.",
        )
    """

    # `text-davinci-edit-001` or `code-davinci-edit-001`
    model: str
    # starting point for the edit; empty input is allowed upstream
    input: Optional[str] = None
    instruction: str
    n: Optional[int] = None
    # alter this or `top_p`, not both
    temperature: Optional[float] = None
    top_p: Optional[float] = None


class EditChoice(APIObject):
    text: str
    index: int


class EditUsage(APIObject):
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class EditResponse(APIObject):
    """`str(response)` is a shortcut to the text of the first choice."""

    object: str = "edit"
    created: int
    choices: List[EditChoice]
    usage: EditUsage

    def __str__(self) -> str:
        return self.choices[0].text if self.choices else ""
