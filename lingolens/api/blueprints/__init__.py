"""
API Routes
"""
from .health_routes import create_health_blueprint
from .translation_routes import create_translation_blueprint
from .suggestion_routes import create_suggestion_blueprint
from .process_routes import create_process_blueprint
from .spellcheck_routes import create_spellcheck_blueprint
from .compare_routes import create_compare_blueprint

__all__ = [
    'create_health_blueprint',
    'create_translation_blueprint',
    'create_suggestion_blueprint',
    'create_process_blueprint',
    'create_spellcheck_blueprint',
    'create_compare_blueprint'
]
