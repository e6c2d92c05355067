"""
Language identification for extracted document text

Uses the langdetect library (a port of Google's language-detection library)
and maps its ISO 639-1 output onto the supported UI languages. Anything the
detector cannot place, or places outside the supported set, resolves to
LanguageCode.UNDETERMINED.
"""
import logging
import re

from langdetect import DetectorFactory, detect_langs, LangDetectException

from lingolens.core.models import LanguageCode

logger = logging.getLogger(__name__)

# langdetect is randomized; a fixed seed makes identification repeatable
DetectorFactory.seed = 0

# Mapping from langdetect codes to supported language codes
LANGUAGE_CODE_MAP = {
    'en': LanguageCode.EN,
    'hi': LanguageCode.HI,
    'fr': LanguageCode.FR,
    'es': LanguageCode.ES,
    'de': LanguageCode.DE,
    'zh-cn': LanguageCode.ZH,
    'zh-tw': LanguageCode.ZH,
    'ja': LanguageCode.JA,
    'ar': LanguageCode.AR,
}

# Below this many characters the statistical guess is noise
MIN_TEXT_LENGTH = 10

# Maximum text to analyze (to avoid performance issues with large documents)
MAX_SAMPLE_LENGTH = 10000


def map_detected_code(raw_code: str) -> LanguageCode:
    """Map a raw detector code to a supported code, or the fallback."""
    return LANGUAGE_CODE_MAP.get((raw_code or '').lower(), LanguageCode.UNDETERMINED)


def _clean_text_for_detection(text: str) -> str:
    # Remove URLs and email addresses, they skew the n-gram profile
    text = re.sub(r'http[s]?://\S+', '', text)
    text = re.sub(r'\S+@\S+', '', text)

    # Remove excessive whitespace
    text = re.sub(r'\s+', ' ', text)
    return text.strip()


def _sample(text: str) -> str:
    if len(text) <= MAX_SAMPLE_LENGTH:
        return text
    # Take samples from beginning, middle, and end
    chunk_size = MAX_SAMPLE_LENGTH // 3
    middle = len(text) // 2
    return ' '.join((
        text[:chunk_size],
        text[middle - chunk_size // 2:middle + chunk_size // 2],
        text[-chunk_size:],
    ))


def identify(text: str) -> LanguageCode:
    """
    Identify the language of a text.

    Args:
        text: Extracted (possibly unprocessed) document text

    Returns:
        Supported LanguageCode, or LanguageCode.UNDETERMINED. Never raises.
    """
    if not isinstance(text, str):
        return LanguageCode.UNDETERMINED

    cleaned = _clean_text_for_detection(text)
    if len(cleaned) < MIN_TEXT_LENGTH:
        return LanguageCode.UNDETERMINED

    try:
        detected_langs = detect_langs(_sample(cleaned))
    except LangDetectException:
        # Language detection library couldn't determine language
        return LanguageCode.UNDETERMINED

    if not detected_langs:
        return LanguageCode.UNDETERMINED

    best_match = detected_langs[0]
    code = map_detected_code(best_match.lang)
    logger.debug(f"Detected '{best_match.lang}' ({best_match.prob:.2f}) -> {code.value}")
    return code
