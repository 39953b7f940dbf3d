"""
FastAPI Application Entry Point

Run: uvicorn main:app --reload --host 0.0.0.0 --port 3001
"""

import logging

from api import create_app
from infra import bootstrap_services, get_config

config = get_config()

# Setup logging
logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = create_app(bootstrap_services(config))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=config.api_port,
        reload=config.environment == "development",
    )
