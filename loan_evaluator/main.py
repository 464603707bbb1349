import logging
import logging.config

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from loan_evaluator.config.settings import settings
from loan_evaluator.routes import evaluate

logging.config.dictConfig({
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"}
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "simple",
            "filename": settings.LOG_FILE,
            "maxBytes": 10_000_000,
            "backupCount": 5,
        },
    },
    "root": {"level": "INFO", "handlers": ["console", "file"]},
})

logger = logging.getLogger("loan_evaluator")

app = FastAPI(
    title="RAI Loan Evaluator API",
    description="Compares an unbiased and a biased LLM loan evaluator on the same applicant",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://127.0.0.1:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(evaluate.router)

@app.get("/health")
async def health():
    return {"status": "healthy"}

def run():
    import argparse
    parser = argparse.ArgumentParser(description="Run the loan evaluator API")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()
    logger.info("Starting loan evaluator on %s:%s", args.host, args.port)
    uvicorn.run(app, host=args.host, port=args.port)

if __name__ == "__main__":
    run()
