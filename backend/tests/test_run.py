"""
Development server options derived from the app config.
"""

import pytest

from cvrtracker import create_app
from run import server_options


@pytest.fixture
def make_app(tmp_path):
    def _make(**overrides):
        config = {'TESTING': True, 'AUDIT_LOG_FILE': str(tmp_path / 'audit.log')}
        config.update(overrides)
        return create_app(config)
    return _make


class TestServerOptions:

    def test_development_defaults(self, make_app):
        options = server_options(make_app(SERVER_HOST='127.0.0.1', SERVER_PORT=5050,
                                          SSL_CERT_PATH=None, SSL_KEY_PATH=None))
        assert options == {'host': '127.0.0.1', 'port': 5050, 'debug': True, 'ssl_context': None}

    def test_certificates_enable_ssl(self, make_app, tmp_path):
        cert = tmp_path / 'cert.pem'
        key = tmp_path / 'key.pem'
        cert.write_text('cert')
        key.write_text('key')
        options = server_options(make_app(SSL_CERT_PATH=str(cert), SSL_KEY_PATH=str(key)))
        assert options['ssl_context'] == (str(cert), str(key))

    def test_production_requires_certificates(self, make_app, tmp_path):
        app = make_app(IS_PRODUCTION=True, ALLOWED_ORIGINS='https://example.org',
                       SSL_CERT_PATH=str(tmp_path / 'missing.pem'), SSL_KEY_PATH=None)
        with pytest.raises(RuntimeError):
            server_options(app)

    def test_production_disables_debug(self, make_app, tmp_path):
        cert = tmp_path / 'cert.pem'
        key = tmp_path / 'key.pem'
        cert.write_text('cert')
        key.write_text('key')
        app = make_app(IS_PRODUCTION=True, ALLOWED_ORIGINS='https://example.org',
                       SSL_CERT_PATH=str(cert), SSL_KEY_PATH=str(key))
        assert server_options(app)['debug'] is False
