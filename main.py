"""
Zoom Gateway Service
Flask application that relays read-only meeting queries to the Zoom API.
"""

import logging
import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from zoom_gateway.app import create_app  # noqa: E402

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = create_app()


if __name__ == '__main__':
    port = int(os.getenv("PORT", 5000))
    debug = os.getenv("DEBUG", "false").lower() == "true"

    print(f"🚀 Starting Zoom Gateway on port {port}")
    print(f"📚 API docs: {app.config['BASE_URL']}/docs")

    app.run(host='0.0.0.0', port=port, debug=debug)
