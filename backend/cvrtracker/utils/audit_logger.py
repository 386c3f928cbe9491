"""
Structured audit logging for calculation and export requests.
Measurement values are not logged; only what was computed and its category.
"""
import os
import logging
import structlog
from datetime import datetime, timezone
from flask import request, current_app, has_request_context


def setup_audit_logging(app):
    """Configure structured JSON audit logging."""

    log_file = app.config.get('AUDIT_LOG_FILE') or os.getenv('AUDIT_LOG_FILE', 'logs/audit.log')
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(logging.Formatter('%(message)s'))

    audit_logger = logging.getLogger('audit')
    audit_logger.setLevel(logging.INFO)
    # create_app may run more than once per process (tests)
    for handler in list(audit_logger.handlers):
        if isinstance(handler, logging.FileHandler):
            audit_logger.removeHandler(handler)
            handler.close()
    audit_logger.addHandler(file_handler)

    app.config['AUDIT_LOGGER'] = structlog.get_logger('audit')


def get_audit_logger():
    """Get the audit logger instance."""
    return current_app.config.get('AUDIT_LOGGER', structlog.get_logger('audit'))


def audit_log(action: str, resource_type: str, details: dict = None):
    """
    Log an audit event.

    Args:
        action: The action performed (CALCULATE, EXPORT)
        resource_type: What was computed (blood_pressure, lipids, risk, trend, ...)
        details: Result categories and counts (optional, no raw measurements)
    """
    logger = get_audit_logger()

    if has_request_context():
        client_ip = request.remote_addr or 'unknown'
        user_agent = request.headers.get('User-Agent', 'unknown')
    else:
        client_ip = 'unknown'
        user_agent = 'unknown'

    log_entry = {
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'action': action,
        'resource_type': resource_type,
        'client_ip': client_ip,
        'user_agent': user_agent,
        'details': details or {}
    }

    logger.info("audit_event", **log_entry)
