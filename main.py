"""
Hosted entrypoint for the lifecycle service.

Binds to 0.0.0.0:$PORT as required by the hosting platform.
"""

import uvicorn

from utils.config import Config
from utils.log import configure_logging

if __name__ == "__main__":
    config = Config.load()
    configure_logging(config.log_level)

    print(f"Starting Buddy Underwriter lifecycle service on port {config.port}")

    # Import app here to ensure clean module loading
    from web.app import app

    uvicorn.run(app, host="0.0.0.0", port=config.port)
