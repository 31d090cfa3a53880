"""
BotCafe - bot profiles, creators and social interactions

Flask application factory and initialization.
"""

import logging

from flask import Flask, jsonify
from config import config


def _configure_logging(app):
    """Root logger level from LOG_LEVEL; Flask's own logger follows it."""
    level = getattr(logging, config.LOG_LEVEL, logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )
    app.logger.setLevel(level)


def create_app(testing=False, store=None):
    """
    Create and configure the Flask application.

    Args:
        testing: Disable rate limits and enable Flask testing mode
        store: Document store to inject; defaults to the SQLAlchemy-backed one
    """

    app = Flask(__name__)

    app.config['TESTING'] = testing

    # Configuration
    app.config['SECRET_KEY'] = config.SECRET_KEY
    app.config['SQLALCHEMY_DATABASE_URI'] = config.SQLALCHEMY_DATABASE_URI
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False

    # Session cookie security
    app.config['SESSION_COOKIE_HTTPONLY'] = True
    app.config['SESSION_COOKIE_SAMESITE'] = 'Lax'
    app.config['SESSION_COOKIE_SECURE'] = config.SESSION_COOKIE_SECURE

    _configure_logging(app)

    # Initialize database and the document store over it
    from botcafe.models import init_db
    init_db(app)

    from botcafe.store import init_store
    init_store(app, store)

    # Initialize authentication
    from botcafe.auth import init_auth
    init_auth(app)

    # Initialize rate limiter
    from botcafe.limiter import limiter
    if app.config.get('TESTING'):
        app.config['RATELIMIT_ENABLED'] = False
    limiter.init_app(app)

    # Register blueprints
    from botcafe.auth.routes import bp as auth_bp
    from botcafe.auth.google import bp as google_auth_bp
    from botcafe.routes.bots import bp as bots_bp
    from botcafe.routes.creators import bp as creators_bp
    from botcafe.routes.sharing import bp as sharing_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(google_auth_bp)
    app.register_blueprint(bots_bp, url_prefix='/api')
    app.register_blueprint(creators_bp, url_prefix='/api')
    app.register_blueprint(sharing_bp, url_prefix='/api')

    from botcafe.exceptions import BotCafeError

    @app.errorhandler(BotCafeError)
    def handle_botcafe_error(e):
        return jsonify({'message': e.message}), e.status_code

    # Default-deny: require auth on all routes except explicit allowlist
    PUBLIC_ENDPOINTS = {
        'google_auth.google_start',
        'google_auth.google_callback',
        'bots.interaction_status',
        'creators.follow_status',
        'static',
    }

    @app.before_request
    def require_auth():
        from flask import request as req
        from flask_login import current_user as cu

        endpoint = req.endpoint
        if endpoint is None:
            return
        if endpoint in PUBLIC_ENDPOINTS:
            return
        if cu.is_authenticated:
            return
        return jsonify({'message': 'Unauthorized'}), 401

    @app.after_request
    def add_security_headers(response):
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
        return response

    return app


__all__ = ['create_app']
