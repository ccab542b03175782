from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Roles used for transcript turns."""

    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """Represents a single turn in a conversation."""

    model_config = ConfigDict(frozen=True)

    role: str = Field(description="Role of the message sender: 'user' or 'assistant'")
    content: str = Field(description="Content of the message")

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(role=Role.USER.value, content=content)

    @classmethod
    def assistant(cls, content: str) -> "Message":
        return cls(role=Role.ASSISTANT.value, content=content)


class ChatRequest(BaseModel):
    """Request body sent to the chat completions endpoint."""

    model_config = ConfigDict(frozen=True)

    model: str = Field(description="Wire-level model name")
    messages: list[Message] = Field(description="Conversation sent in order")


class Choice(BaseModel):
    """A single completion choice; only the message is read."""

    message: Message


class ChatResponse(BaseModel):
    """Response body from the chat completions endpoint.

    All fields other than ``choices`` are ignored.
    """

    choices: list[Choice] | None = None

    @property
    def first_content(self) -> str | None:
        """Content of the first choice, or None when there are no choices."""
        if not self.choices:
            return None
        return self.choices[0].message.content


class ChatResultStatus(str, Enum):
    """How a single exchange with the API resolved."""

    SUCCESS = "success"
    EMPTY = "empty"
    ERROR = "error"


class ChatResult(BaseModel):
    """Typed outcome of one request/response exchange."""

    model_config = ConfigDict(frozen=True)

    status: ChatResultStatus = Field(description="Resolution of the exchange")
    content: str = Field(default="", description="Reply text when successful")
    error: str | None = Field(default=None, description="Diagnostic text on failure")
    status_code: int | None = Field(default=None, description="HTTP status when known")

    @property
    def ok(self) -> bool:
        return self.status is ChatResultStatus.SUCCESS

    @classmethod
    def success(cls, content: str, status_code: int | None = None) -> "ChatResult":
        return cls(status=ChatResultStatus.SUCCESS, content=content, status_code=status_code)

    @classmethod
    def empty(cls, status_code: int | None = None) -> "ChatResult":
        return cls(status=ChatResultStatus.EMPTY, status_code=status_code)

    @classmethod
    def failure(cls, error: str, status_code: int | None = None) -> "ChatResult":
        return cls(status=ChatResultStatus.ERROR, error=error, status_code=status_code)
