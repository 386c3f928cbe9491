"""
Development server for the cvrtracker API.

Host, port and SSL paths come from the app config (FLASK_HOST, FLASK_PORT,
SSL_CERT_PATH, SSL_KEY_PATH); see create_app.
"""
import os
import logging
from cvrtracker import create_app

logger = logging.getLogger(__name__)


def server_options(app):
    """Keyword arguments for app.run() derived from the app config."""
    config = app.config
    cert_path = config.get('SSL_CERT_PATH')
    key_path = config.get('SSL_KEY_PATH')

    ssl_context = None
    if cert_path and key_path and os.path.exists(cert_path) and os.path.exists(key_path):
        ssl_context = (cert_path, key_path)
    elif config['IS_PRODUCTION']:
        raise RuntimeError(
            'Serving in production needs SSL_CERT_PATH and SSL_KEY_PATH '
            'to point at certificate files.'
        )

    return {
        'host': config['SERVER_HOST'],
        'port': config['SERVER_PORT'],
        'debug': not config['IS_PRODUCTION'],
        'ssl_context': ssl_context,
    }


def main():
    app = create_app()
    options = server_options(app)
    logger.info(f"Serving on {options['host']}:{options['port']} "
                f"({'https' if options['ssl_context'] else 'http'})")
    app.run(**options)


if __name__ == '__main__':
    main()
