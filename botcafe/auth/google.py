"""
Google OAuth 2.0 routes for BotCafe.

Implements Authorization Code flow via Authlib.
Config required: GOOGLE_CLIENT_ID, GOOGLE_CLIENT_SECRET
"""

import logging
import os

from authlib.integrations.flask_client import OAuth
from flask import Blueprint, redirect, url_for, jsonify
from flask_login import login_user

from botcafe.auth import Identity, sync_user
from botcafe.store import get_store
from config import config

logger = logging.getLogger(__name__)

bp = Blueprint('google_auth', __name__)

oauth = OAuth()

GOOGLE_CONF_URL = 'https://accounts.google.com/.well-known/openid-configuration'


def init_google_oauth(app):
    """Register the Google OAuth client with the Flask app."""
    client_id = config.GOOGLE_CLIENT_ID
    client_secret = config.GOOGLE_CLIENT_SECRET

    if not client_id or not client_secret:
        app.logger.info('Google OAuth not configured (GOOGLE_CLIENT_ID / GOOGLE_CLIENT_SECRET missing)')
        return False

    oauth.init_app(app)
    oauth.register(
        name='google',
        client_id=client_id,
        client_secret=client_secret,
        server_metadata_url=GOOGLE_CONF_URL,
        client_kwargs={'scope': 'openid email profile'},
    )
    return True


@bp.route('/api/auth/google/start')
def google_start():
    """Redirect user to Google consent screen."""
    google = oauth.create_client('google')
    if google is None:
        return jsonify({'message': 'Google OAuth is not configured'}), 503

    if config.BASE_URL:
        redirect_uri = f"{config.BASE_URL}/api/auth/google/callback"
    else:
        redirect_uri = url_for('google_auth.google_callback', _external=True)
    return google.authorize_redirect(redirect_uri, nonce=os.urandom(16).hex())


@bp.route('/api/auth/google/callback')
def google_callback():
    """Handle the OAuth callback from Google and sync the user record."""
    google = oauth.create_client('google')
    if google is None:
        return redirect('/?error=google_not_configured')

    try:
        token = google.authorize_access_token()
    except Exception as e:
        logger.warning('Google token exchange failed: %s', e)
        return redirect('/?error=google_auth_failed')

    userinfo = token.get('userinfo')
    if not userinfo:
        try:
            userinfo = google.userinfo()
        except Exception as e:
            logger.warning('Google userinfo request failed: %s', e)
            return redirect('/?error=google_userinfo_failed')

    email = (userinfo.get('email') or '').strip().lower()
    if not email:
        return redirect('/?error=google_no_email')

    if not userinfo.get('email_verified', False):
        return redirect('/?error=google_email_not_verified')

    user = sync_user(
        get_store(),
        email,
        name=userinfo.get('name') or '',
        google_sub=userinfo.get('sub') or None,
        avatar_url=userinfo.get('picture') or None,
    )
    if not user['is_active']:
        return redirect('/?error=account_disabled')

    login_user(Identity(email))
    return redirect('/')
