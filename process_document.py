"""
Command-line interface for document processing
"""
import sys
import json
import argparse
import asyncio
import logging

from lingolens.config import (
    DEFAULT_LANGUAGE,
    SUGGESTION_API_URL,
    TRANSLATION_API_URL,
    PipelineConfig,
    setup_logging,
)
from lingolens.core.annotation import SuggestionClient, get_spell_oracle
from lingolens.core.compare import compare
from lingolens.core.exceptions import ExtractionError, UnsupportedLanguageError
from lingolens.core.extraction import default_extractors
from lingolens.core.models import LanguageCode, UploadedFile
from lingolens.core.pipeline import process

logger = logging.getLogger('process_document')


class Colors:
    YELLOW = '\033[93m'
    GRAY = '\033[90m'
    GREEN = '\033[92m'
    RED = '\033[91m'
    ENDC = '\033[0m'


def paint(text, color, enabled=True):
    return f"{color}{text}{Colors.ENDC}" if enabled else text


def print_result(result, enable_colors=True):
    """Human readable report of a PipelineResult"""
    detected = ', '.join(code.value for code in result.detected_languages)
    translated = ', '.join(code.value for code in result.translated_to) or '-'
    print(paint("=" * 70, Colors.GRAY, enable_colors))
    print(paint("Detected language: ", Colors.YELLOW, enable_colors) + detected)
    print(paint("Translated to:     ", Colors.YELLOW, enable_colors) + translated)
    print(paint("Words:             ", Colors.YELLOW, enable_colors) + f"{len(result.words)} ({result.words.source})")
    print(paint("=" * 70, Colors.GRAY, enable_colors))
    print(result.text)
    print(paint("\nSummary", Colors.GREEN, enable_colors))
    print(result.summary)


def flagged_words(result):
    return [word for word in get_spell_oracle().annotate(result.words) if not word.is_correct]


async def ai_corrections(result, flagged, config):
    """Ask the suggestion service for one correction per flagged word.

    The whole document text is sent as context. Unavailable service means
    the original word comes back unchanged.
    """
    async with SuggestionClient(config.suggestion_api_url, config.timeout) as client:
        return [await client.suggest(result.text, word.text) for word in flagged]


def spelling_report(result, config, use_ai=False):
    flagged = flagged_words(result)
    corrections = asyncio.run(ai_corrections(result, flagged, config)) if use_ai else [None] * len(flagged)
    report = []
    for word, correction in zip(flagged, corrections):
        entry = {"word": word.text, "index": word.original.index, "suggestions": word.suggestions}
        if use_ai:
            entry["aiSuggestion"] = correction
        report.append(entry)
    return report


def print_spelling(report, enable_colors=True):
    """List the words the dictionary flags, with their suggestions"""
    print(paint(f"\nSpelling: {len(report)} word(s) flagged", Colors.YELLOW, enable_colors))
    for entry in report:
        suggestions = ', '.join(entry["suggestions"]) or 'no suggestion'
        line = f"  {paint(entry['word'], Colors.RED, enable_colors)} -> {suggestions}"
        if "aiSuggestion" in entry:
            line += paint(f" (AI: {entry['aiSuggestion']})", Colors.GREEN, enable_colors)
        print(line)


def print_comparison(comparison, enable_colors=True):
    """Human readable report of a DocumentComparison"""
    if comparison.identical:
        print(paint("Documents have the same words.", Colors.GREEN, enable_colors))
        return
    for phrase in comparison.removed:
        print(paint(f"- {phrase}", Colors.RED, enable_colors))
    for phrase in comparison.added:
        print(paint(f"+ {phrase}", Colors.GREEN, enable_colors))


def run_compare(args, config):
    try:
        file_a = UploadedFile.from_path(args.input, args.mime_type)
        file_b = UploadedFile.from_path(args.compare, args.mime_type)
    except OSError as e:
        logger.error(f"Cannot read input: {e}")
        sys.exit(1)

    try:
        comparison = asyncio.run(compare(file_a, file_b, default_extractors(config.tesseract_lang)))
    except ExtractionError as e:
        logger.error(f"Comparison failed: {e}")
        sys.exit(1)

    if args.json:
        print(json.dumps(comparison.to_dict(), ensure_ascii=False, indent=2))
    else:
        print_comparison(comparison, config.enable_colors)


if __name__ == "__main__":
    supported = ', '.join(code.value for code in LanguageCode.supported())
    parser = argparse.ArgumentParser(description="Extract, translate and summarize a PDF, image, text or CSV document.")
    parser.add_argument("-i", "--input", required=True, help="Path to the input document.")
    parser.add_argument("-l", "--languages", default=DEFAULT_LANGUAGE, help=f"Comma separated target languages, first one is primary. One of: {supported} (default: {DEFAULT_LANGUAGE}).")
    parser.add_argument("--mime-type", default=None, help="Declared MIME type (default: guessed from the file extension).")
    parser.add_argument("--translation-api", default=TRANSLATION_API_URL, help=f"Translation gateway URL (default: {TRANSLATION_API_URL}).")
    parser.add_argument("--suggestion-api", default=SUGGESTION_API_URL, help=f"AI suggestion service URL (default: {SUGGESTION_API_URL}).")
    parser.add_argument("--compare", default=None, metavar="PATH", help="Compare the input with this document instead of processing it.")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON.")
    parser.add_argument("--check-spelling", action="store_true", help="List words not found in the dictionary.")
    parser.add_argument("--ai-suggestions", action="store_true", help="With --check-spelling, also ask the AI suggestion service.")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output.")

    args = parser.parse_args()
    setup_logging()

    config = PipelineConfig.from_cli_args(args)

    if args.compare:
        run_compare(args, config)
        sys.exit(0)

    languages = [code.strip() for code in args.languages.split(',') if code.strip()]

    try:
        uploaded = UploadedFile.from_path(args.input, args.mime_type)
    except OSError as e:
        logger.error(f"Cannot read {args.input}: {e}")
        sys.exit(1)

    try:
        result = asyncio.run(process(uploaded, languages, config=config))
    except (ExtractionError, UnsupportedLanguageError, ValueError) as e:
        logger.error(f"Processing failed: {e}")
        sys.exit(1)

    report = spelling_report(result, config, args.ai_suggestions) if args.check_spelling else None
    if args.json:
        data = result.to_dict()
        if report is not None:
            data["spelling"] = report
        print(json.dumps(data, ensure_ascii=False, indent=2))
    else:
        print_result(result, config.enable_colors)
        if report is not None:
            print_spelling(report, config.enable_colors)
