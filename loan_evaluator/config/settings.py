import os

from dotenv import load_dotenv

load_dotenv()

class Settings:
    OPENAI_URL = os.getenv("LOAN_EVALUATOR_OPENAI_URL")
    if not OPENAI_URL:
        raise RuntimeError("LOAN_EVALUATOR_OPENAI_URL environment variable is required.")

    OPENAI_API_KEY = os.getenv("LOAN_EVALUATOR_OPENAI_API_KEY", "")
    OPENAI_API_VERSION = os.getenv("LOAN_EVALUATOR_OPENAI_API_VERSION")
    MODEL = os.getenv("LOAN_EVALUATOR_MODEL", "gpt-35-turbo")

    MAX_TOKENS = int(os.getenv("LOAN_EVALUATOR_MAX_TOKENS", "500"))
    TEMPERATURE = float(os.getenv("LOAN_EVALUATOR_TEMPERATURE", "0.1"))

    LOG_FILE = os.getenv("LOAN_EVALUATOR_LOG_FILE", "loan_evaluator.log")

settings = Settings()
