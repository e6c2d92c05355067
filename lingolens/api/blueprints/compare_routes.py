"""
Document comparison route
"""
import asyncio
import logging
from flask import Blueprint, request, jsonify

from lingolens.core.compare import compare
from lingolens.core.exceptions import ExtractionError, UnsupportedFormatError
from lingolens.core.models import UploadedFile

logger = logging.getLogger(__name__)


def _read_upload(field_name):
    file = request.files.get(field_name)
    if not file or file.filename == '':
        return None
    return UploadedFile(filename=file.filename, mime_type=file.mimetype or "", data=file.read())


def create_compare_blueprint(extractors=None):
    """
    Create the document comparison blueprint

    Args:
        extractors: Optional override of the per-kind extractors
    """
    bp = Blueprint('compare', __name__)

    @bp.route('/api/compare', methods=['POST'])
    def compare_documents():
        file_a = _read_upload('fileA')
        file_b = _read_upload('fileB')
        if file_a is None or file_b is None:
            return jsonify({"error": "Both 'fileA' and 'fileB' are required"}), 400

        try:
            comparison = asyncio.run(compare(file_a, file_b, extractors))
        except UnsupportedFormatError as e:
            return jsonify({"error": str(e)}), 400
        except ExtractionError as e:
            logger.warning(f"Comparison failed for {file_a.filename} / {file_b.filename}: {e}")
            return jsonify({"error": str(e)}), 422

        return jsonify(comparison.to_dict())

    return bp
