"""Help topics for configuring the Mistral API settings."""

from pydantic import BaseModel, ConfigDict, Field

DOCUMENTATION_URL = "https://docs.mistral.ai/"


class HelpTopic(BaseModel):
    """A short help page with a link to the relevant Mistral page."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(description="Identifier used on the command line")
    title: str = Field(description="Question the topic answers")
    paragraphs: tuple[str, ...] = Field(description="Help text, one step per paragraph")
    url: str = Field(description="Page to open for more details")


HELP_TOPICS: dict[str, HelpTopic] = {
    topic.key: topic
    for topic in (
        HelpTopic(
            key="api-key",
            title="How to get an API key from Mistral AI?",
            paragraphs=(
                "Sign up or sign in: you need an account with Mistral AI. "
                "If you don't have one, sign up on their platform, otherwise sign in.",
                "Go to the API section: API keys are managed in your account settings "
                "or in a dedicated API keys section of the console.",
                "Generate an API key: choose the option to create a new key, give it "
                "a name and pick an expiration date.",
                "Copy the API key as soon as it is generated, then run "
                "'mistral-chat configure --api-key <KEY>'.",
            ),
            url="https://console.mistral.ai/",
        ),
        HelpTopic(
            key="api-url",
            title="Which API URL should be used?",
            paragraphs=(
                "The API URL is the chat completions endpoint of the Mistral API. "
                "The default, https://api.mistral.ai/v1/chat/completions, is what most "
                "setups need; check the API documentation for the exact address.",
            ),
            url="https://docs.mistral.ai/api/",
        ),
        HelpTopic(
            key="models",
            title="Which model to choose?",
            paragraphs=(
                "mistral-nemo (open-mistral-nemo), mistral-small (mistral-small-latest) "
                "and codestral-mamba (open-codestral-mamba) can be selected.",
                "More information about the models is available in the models overview "
                "of the official Mistral AI documentation.",
            ),
            url="https://docs.mistral.ai/getting-started/models/models_overview/",
        ),
    )
}


def get_help_topic(key: str) -> HelpTopic:
    """Look up a help topic by key.

    Raises:
        ValueError: If no topic has that key
    """
    topic = HELP_TOPICS.get(key.lower())
    if topic is None:
        raise ValueError(
            f"Unknown help topic: {key}. "
            f"Available topics: {', '.join(HELP_TOPICS)}"
        )
    return topic
