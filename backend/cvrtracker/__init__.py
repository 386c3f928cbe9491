import os
import logging
from flask import Flask, request, redirect, jsonify
from flask_cors import CORS
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def create_app(test_config=None):
    app = Flask(__name__)

    is_production = os.getenv('FLASK_ENV') == 'production'

    app.config['AUDIT_LOG_FILE'] = os.getenv('AUDIT_LOG_FILE', 'logs/audit.log')
    app.config['TREND_MIN_READINGS'] = int(os.getenv('TREND_MIN_READINGS', 2))
    app.config['TREND_WINDOW_SIZE'] = int(os.getenv('TREND_WINDOW_SIZE', 14))
    app.config['ALLOWED_ORIGINS'] = os.getenv('ALLOWED_ORIGINS', '')
    app.config['IS_PRODUCTION'] = is_production

    # Development server settings, read by run.py
    app.config['SERVER_HOST'] = os.getenv('FLASK_HOST', '0.0.0.0')
    app.config['SERVER_PORT'] = int(os.getenv('FLASK_PORT', 3001))
    app.config['SSL_CERT_PATH'] = os.getenv('SSL_CERT_PATH')
    app.config['SSL_KEY_PATH'] = os.getenv('SSL_KEY_PATH')

    # Request size limit (1 MB)
    app.config['MAX_CONTENT_LENGTH'] = 1 * 1024 * 1024

    if test_config:
        app.config.update(test_config)
    is_production = app.config['IS_PRODUCTION']

    if app.config['TREND_MIN_READINGS'] < 2:
        raise RuntimeError('TREND_MIN_READINGS must be at least 2')

    # CORS: restrict origins
    allowed_origins = app.config['ALLOWED_ORIGINS']
    if allowed_origins:
        origins_list = [o.strip() for o in allowed_origins.split(',') if o.strip()]
    elif is_production:
        raise RuntimeError(
            'ALLOWED_ORIGINS environment variable is required in production'
        )
    else:
        # Development: allow localhost variants
        origins_list = [
            'http://localhost:*',
            'http://127.0.0.1:*',
        ]

    CORS(app, resources={
        r"/calc/*": {"origins": origins_list},
        r"/export/*": {"origins": origins_list}
    })

    # Redirect HTTP to HTTPS in production
    if is_production:
        @app.before_request
        def enforce_https():
            if not request.is_secure and request.headers.get('X-Forwarded-Proto', 'http') != 'https':
                url = request.url.replace('http://', 'https://', 1)
                return redirect(url, code=301)

    # Security headers
    @app.after_request
    def add_security_headers(response):
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        response.headers['Content-Security-Policy'] = "default-src 'none'; frame-ancestors 'none'"
        response.headers['Cache-Control'] = 'no-store, no-cache, must-revalidate'
        response.headers['Referrer-Policy'] = 'no-referrer'
        if is_production or request.is_secure:
            response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
        return response

    # Calculation endpoints only accept JSON bodies
    @app.before_request
    def validate_content_type():
        if request.method in ('POST', 'PUT') and request.path != '/health':
            content_type = request.content_type or ''
            if 'application/json' not in content_type:
                return jsonify({'error': 'Content-Type must be application/json'}), 415

    from cvrtracker.utils.audit_logger import setup_audit_logging
    setup_audit_logging(app)

    # Register blueprints
    from cvrtracker.routes.calculator import calculator_bp
    from cvrtracker.routes.exports import exports_bp

    app.register_blueprint(calculator_bp, url_prefix='/calc')
    app.register_blueprint(exports_bp, url_prefix='/export')

    @app.route('/health')
    def health():
        return {'status': 'healthy'}, 200

    logger.info(f"CVR tracker API ready (trend window {app.config['TREND_WINDOW_SIZE']}, "
                f"minimum {app.config['TREND_MIN_READINGS']} readings)")
    return app
