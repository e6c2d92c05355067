"""
Document processing route
"""
import asyncio
import logging
from flask import Blueprint, request, jsonify

from lingolens.config import DEFAULT_LANGUAGE, PipelineConfig
from lingolens.core.exceptions import (
    ExtractionError,
    UnsupportedFormatError,
    UnsupportedLanguageError,
)
from lingolens.core.models import UploadedFile
from lingolens.core.pipeline import DocumentPipeline

logger = logging.getLogger(__name__)


def parse_languages(raw):
    """Split a comma separated language list, defaulting to DEFAULT_LANGUAGE."""
    languages = [code.strip() for code in (raw or "").split(',') if code.strip()]
    return languages or [DEFAULT_LANGUAGE]


def create_process_blueprint(gateway_factory, extractors=None):
    """
    Create the document processing blueprint

    Args:
        gateway_factory: Callable returning a fresh TranslationGateway per request
        extractors: Optional override of the per-kind extractors
    """
    bp = Blueprint('process', __name__)

    async def _run(uploaded, languages, config):
        gateway = gateway_factory()
        try:
            pipeline = DocumentPipeline(gateway, config, extractors=extractors)
            return await pipeline.process(uploaded, languages)
        finally:
            await gateway.close()

    @bp.route('/api/process', methods=['POST'])
    def process_document():
        if 'file' not in request.files:
            return jsonify({"error": "No file part in request"}), 400

        file = request.files['file']
        if not file or file.filename == '':
            return jsonify({"error": "No file selected"}), 400

        uploaded = UploadedFile(
            filename=file.filename,
            mime_type=file.mimetype or "",
            data=file.read()
        )
        languages = parse_languages(request.form.get('languages'))
        try:
            config = PipelineConfig.from_request(request.form.to_dict())
        except ValueError as e:
            return jsonify({"error": str(e)}), 400
        logger.info(f"Processing {uploaded.filename} ({uploaded.mime_type}) for {languages}")

        try:
            result = asyncio.run(_run(uploaded, languages, config))
        except (UnsupportedFormatError, UnsupportedLanguageError) as e:
            return jsonify({"error": str(e)}), 400
        except ExtractionError as e:
            logger.warning(f"Extraction failed for {uploaded.filename}: {e}")
            return jsonify({"error": str(e)}), 422

        return jsonify(result.to_dict())

    return bp
