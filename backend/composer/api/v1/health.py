from flask import jsonify
from composer.registry import current_registry
from . import v1_bp

@v1_bp.route('/health', methods=['GET'])
def health_check():
    return jsonify({
        "status": "ok",
        "service": "page-composer",
        "sections": len(current_registry())
    })
