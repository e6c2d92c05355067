"""
Health check route
"""
from flask import Blueprint, jsonify


def create_health_blueprint():
    """Create the health check blueprint"""
    bp = Blueprint('health', __name__)

    @bp.route('/api/health', methods=['GET'])
    def health_check():
        """API health check endpoint"""
        return jsonify({"status": "ok"})

    return bp
