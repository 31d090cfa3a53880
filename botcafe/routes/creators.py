"""
Creator Routes - creator profile setup and follow / unfollow.
"""

from flask import Blueprint, jsonify, request

from botcafe.exceptions import BotCafeError
from botcafe.routes import caller_user_id, creator_service, follow_service

bp = Blueprint('creators', __name__)


@bp.errorhandler(BotCafeError)
def handle_error(e):
    return jsonify({'success': False, 'message': e.message}), e.status_code


@bp.route('/creators', methods=['POST'])
def create_profile():
    """Set up the caller's creator profile."""
    data = request.get_json(silent=True) or {}
    profile = creator_service().create_profile(
        caller_user_id(),
        str(data.get('username') or ''),
        str(data.get('display_name') or ''),
        str(data.get('bio') or ''),
    )
    return jsonify({
        'success': True,
        'creator': profile,
        'message': 'Creator profile created successfully',
    }), 201


@bp.route('/creators/me', methods=['GET'])
def my_profile():
    """The caller's creator profile; unsynced callers simply have none."""
    profile = creator_service().profile_for(caller_user_id(required=False))
    return jsonify({
        'success': True,
        'creator': profile,
        'hasProfile': profile is not None,
    })


@bp.route('/creators/<username>/follow', methods=['POST'])
def toggle_follow(username):
    """Follow the creator, or unfollow if already following."""
    result = follow_service().toggle_follow(caller_user_id(), username)
    return jsonify({
        'success': True,
        'following': result.following,
        'followerCount': result.follower_count,
        'message': 'Now following' if result.following else 'Unfollowed',
    })


@bp.route('/creators/<username>/follow', methods=['GET'])
def follow_status(username):
    """Whether the caller follows this creator, plus the follower count."""
    result = follow_service().follow_status(caller_user_id(required=False), username)
    return jsonify({
        'success': True,
        'following': result.following,
        'followerCount': result.follower_count,
    })
