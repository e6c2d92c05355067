"""
Centralized configuration
"""
import os
import logging
from pathlib import Path
from dataclasses import dataclass
from dotenv import load_dotenv

# Setup debug logger for configuration
_config_logger = logging.getLogger('config')

# Check for DEBUG_MODE early (before .env is loaded, check environment)
_debug_mode = os.getenv('DEBUG_MODE', 'false').lower() == 'true'

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Load .env file from the current working directory if it exists
_env_file = Path.cwd() / '.env'
if _env_file.exists():
    load_dotenv(_env_file)

# Collaborator endpoints
TRANSLATION_API_URL = os.getenv('TRANSLATION_API_URL', 'http://localhost:5001/api/translate')
SUGGESTION_API_URL = os.getenv('SUGGESTION_API_URL', 'http://localhost:5001/api/ai-suggestion')
REQUEST_TIMEOUT = float(os.getenv('REQUEST_TIMEOUT', '30'))

# Translation chunking and soft rate limit
# 500 characters keeps each request under the gateway payload limit
TRANSLATION_CHUNK_SIZE = int(os.getenv('TRANSLATION_CHUNK_SIZE', '500'))
TRANSLATION_DELAY_SECONDS = float(os.getenv('TRANSLATION_DELAY_SECONDS', '0.1'))

# Languages
DEFAULT_LANGUAGE = os.getenv('DEFAULT_LANGUAGE', 'en')

# Static confidence reported in every pipeline result
PIPELINE_CONFIDENCE = float(os.getenv('PIPELINE_CONFIDENCE', '0.85'))

# OCR
TESSERACT_LANG = os.getenv('TESSERACT_LANG', 'eng')

# Suggestion server (LLM-backed spelling assistant)
OPENAI_API_KEY = os.getenv('OPENAI_API_KEY', '')
OPENAI_API_ENDPOINT = os.getenv('OPENAI_API_ENDPOINT', 'https://api.openai.com/v1/chat/completions')
SUGGESTION_MODEL = os.getenv('SUGGESTION_MODEL', 'gpt-3.5-turbo')

# Server configuration
HOST = os.getenv('HOST', '127.0.0.1')
PORT = int(os.getenv('PORT', '5001'))

# Debug mode (reload after .env is loaded)
DEBUG_MODE = os.getenv('DEBUG_MODE', 'false').lower() == 'true'

# Sentence terminators used by the extractive summarizer
SENTENCE_TERMINATORS = ".!?"
MIN_SENTENCE_LENGTH = 20
LONG_SENTENCE_LENGTH = 50
MAX_SUMMARY_SENTENCES = 5

if DEBUG_MODE or _debug_mode:
    _config_logger.setLevel(logging.DEBUG)
    _config_logger.debug("LOADED CONFIGURATION VALUES:")
    _config_logger.debug(f"   TRANSLATION_API_URL: {TRANSLATION_API_URL}")
    _config_logger.debug(f"   SUGGESTION_API_URL: {SUGGESTION_API_URL}")
    _config_logger.debug(f"   TRANSLATION_CHUNK_SIZE: {TRANSLATION_CHUNK_SIZE}")
    _config_logger.debug(f"   TRANSLATION_DELAY_SECONDS: {TRANSLATION_DELAY_SECONDS}")
    _config_logger.debug(f"   DEFAULT_LANGUAGE: {DEFAULT_LANGUAGE}")
    _config_logger.debug(f"   OPENAI_API_KEY: {'***' + OPENAI_API_KEY[-4:] if OPENAI_API_KEY else '(not set)'}")


def setup_logging(debug: bool = DEBUG_MODE) -> None:
    """Configure root logging for the CLI and the API server"""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT
    )
    # Reduce verbosity of HTTP client and Flask server logs
    logging.getLogger('werkzeug').setLevel(logging.WARNING)
    logging.getLogger('httpx').setLevel(logging.WARNING)


@dataclass
class PipelineConfig:
    """Settings shared by the CLI and the web interface"""

    translation_api_url: str = TRANSLATION_API_URL
    suggestion_api_url: str = SUGGESTION_API_URL
    timeout: float = REQUEST_TIMEOUT
    chunk_size: int = TRANSLATION_CHUNK_SIZE
    translation_delay: float = TRANSLATION_DELAY_SECONDS
    confidence: float = PIPELINE_CONFIDENCE
    tesseract_lang: str = TESSERACT_LANG

    enable_colors: bool = True

    @classmethod
    def from_cli_args(cls, args) -> 'PipelineConfig':
        """Create config from CLI arguments"""
        return cls(
            translation_api_url=getattr(args, 'translation_api', TRANSLATION_API_URL),
            suggestion_api_url=getattr(args, 'suggestion_api', SUGGESTION_API_URL),
            enable_colors=not getattr(args, 'no_color', False),
        )

    @classmethod
    def from_request(cls, request_data: dict) -> 'PipelineConfig':
        """
        Create config from web request data

        Raises:
            ValueError: If `timeout` is not a positive number
        """
        raw_timeout = request_data.get('timeout', REQUEST_TIMEOUT)
        try:
            timeout = float(raw_timeout)
        except (TypeError, ValueError):
            raise ValueError(f"timeout must be a number, got {raw_timeout!r}")
        if not 0 < timeout < float('inf'):
            raise ValueError(f"timeout must be a positive number, got {raw_timeout!r}")
        return cls(timeout=timeout, enable_colors=False)
