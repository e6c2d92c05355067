"""
Companion HTTP server: translation gateway and AI spelling suggestions
"""
import logging

from lingolens.config import HOST, PORT, DEBUG_MODE, OPENAI_API_KEY, setup_logging
from lingolens.api import create_app

setup_logging()
logger = logging.getLogger(__name__)

app = create_app()


if __name__ == '__main__':
    if not OPENAI_API_KEY:
        logger.warning("OPENAI_API_KEY is not set; /api/ai-suggestion will fail and keep words unchanged")
    logger.info(f"Suggestion server running on http://{HOST}:{PORT}")
    app.run(host=HOST, port=PORT, debug=DEBUG_MODE)
