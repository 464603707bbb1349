from openai import AsyncOpenAI

from loan_evaluator.config.settings import settings

def get_openai_client() -> AsyncOpenAI:
    # Azure-style deployments authenticate with an "api-key" header and
    # select the API surface through the "api-version" query parameter.
    default_query = {"api-version": settings.OPENAI_API_VERSION} if settings.OPENAI_API_VERSION else None
    return AsyncOpenAI(
        api_key=settings.OPENAI_API_KEY or "none",
        base_url=settings.OPENAI_URL,
        default_headers={"api-key": settings.OPENAI_API_KEY},
        default_query=default_query,
        max_retries=0,
    )
