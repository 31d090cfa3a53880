"""
Access control model - explicit grants of access to a resource.
"""

from datetime import datetime

from .database import db


class AccessControl(db.Model):
    """Grant of read/write/admin access on a resource to a user."""

    __tablename__ = 'access_control'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    granted_by_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=True)
    resource_type = db.Column(db.String(30), nullable=False, index=True)
    resource_id = db.Column(db.String(50), nullable=False, index=True)
    # read | write | admin
    permission_type = db.Column(db.String(10), nullable=False, default='read')
    grant_method = db.Column(db.String(30), nullable=False, default='direct-share')
    is_revoked = db.Column(db.Boolean, nullable=False, default=False)
    revoked_by_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=True)
    revoked_at = db.Column(db.DateTime, nullable=True)
    revoked_reason = db.Column(db.String(255), nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
