from . import health_bp


@health_bp.route('/health', methods=['GET'])
def health():
    """Static liveness check, never touches downstream services"""
    return 'OK', 200, {'Content-Type': 'text/plain; charset=utf-8'}
