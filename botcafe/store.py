"""
Document store over the SQLAlchemy models.

Services talk to persistence only through this class, addressing records by
collection name and filtering with equality / ``and`` conditions:

    store.find('bot_interactions', {
        'and': [
            {'user_id': {'equals': 1}},
            {'bot_id': {'equals': 7}},
        ]
    }, limit=1)

Every write commits on its own; nothing spans two calls.
"""

import logging

from flask import current_app
from sqlalchemy import and_
from sqlalchemy.exc import SQLAlchemyError

from botcafe.exceptions import NotFound, StoreError
from botcafe.models import (
    db, User, Bot, BotInteraction, CreatorProfile, CreatorFollow, AccessControl,
)

logger = logging.getLogger(__name__)

COLLECTIONS = {
    'users': User,
    'bots': Bot,
    'bot_interactions': BotInteraction,
    'creator_profiles': CreatorProfile,
    'creator_follows': CreatorFollow,
    'access_control': AccessControl,
}


class FindResult:
    """Page of documents returned by :meth:`DocumentStore.find`."""

    def __init__(self, docs, total_docs):
        self.docs = docs
        self.total_docs = total_docs

    def first(self):
        return self.docs[0] if self.docs else None

    def __len__(self):
        return len(self.docs)


class DocumentStore:
    """CRUD by collection name backed by a Flask-SQLAlchemy session."""

    def __init__(self, database=None, collections=None):
        self.db = database or db
        self.collections = collections or COLLECTIONS

    # ==================== Helpers ====================

    def _model(self, collection):
        model = self.collections.get(collection)
        if model is None:
            raise StoreError(f'Unknown collection: {collection}', collection=collection)
        return model

    @staticmethod
    def _to_doc(row):
        return {c.name: getattr(row, c.name) for c in row.__table__.columns}

    def _column(self, model, field):
        if field not in model.__table__.columns:
            raise StoreError(f'Unknown field "{field}" on {model.__tablename__}')
        return getattr(model, field)

    def _clause(self, model, where):
        """Translate ``{'field': {'equals': v}}`` / ``{'and': [...]}`` to SQL."""
        clauses = []
        for field, condition in (where or {}).items():
            if field == 'and':
                clauses.append(and_(*[self._clause(model, sub) for sub in condition]))
                continue
            if not isinstance(condition, dict) or set(condition) != {'equals'}:
                raise StoreError(f'Unsupported filter on "{field}": only equals is allowed')
            clauses.append(self._column(model, field) == condition['equals'])
        return and_(*clauses) if clauses else None

    def _fail(self, op, collection, error):
        self.db.session.rollback()
        logger.exception('Store %s on %s failed: %s', op, collection, error)
        return StoreError(str(error) or f'Failed to {op} {collection}', collection=collection)

    # ==================== Operations ====================

    def find(self, collection, where=None, limit=10):
        """Return documents matching ``where``; ``limit=None`` returns all."""
        model = self._model(collection)
        clause = self._clause(model, where)
        try:
            query = self.db.session.query(model)
            if clause is not None:
                query = query.filter(clause)
            total = query.count()
            query = query.order_by(model.id)
            if limit is not None:
                query = query.limit(limit)
            rows = query.all()
        except SQLAlchemyError as e:
            raise self._fail('find', collection, e) from e
        return FindResult([self._to_doc(r) for r in rows], total)

    def count(self, collection, where=None):
        """Number of documents matching ``where``."""
        return self.find(collection, where, limit=0).total_docs

    def find_by_id(self, collection, doc_id):
        """Return the document or None."""
        model = self._model(collection)
        try:
            row = self.db.session.get(model, doc_id)
        except SQLAlchemyError as e:
            raise self._fail('find', collection, e) from e
        return self._to_doc(row) if row is not None else None

    def create(self, collection, data):
        model = self._model(collection)
        for field in data:
            self._column(model, field)
        try:
            row = model(**data)
            self.db.session.add(row)
            self.db.session.commit()
        except SQLAlchemyError as e:
            raise self._fail('create', collection, e) from e
        return self._to_doc(row)

    def update(self, collection, doc_id, data):
        model = self._model(collection)
        for field in data:
            self._column(model, field)
        try:
            row = self.db.session.get(model, doc_id)
            if row is None:
                raise NotFound(f'{collection} {doc_id} not found')
            for field, value in data.items():
                setattr(row, field, value)
            self.db.session.commit()
        except SQLAlchemyError as e:
            raise self._fail('update', collection, e) from e
        return self._to_doc(row)

    def delete(self, collection, doc_id):
        model = self._model(collection)
        try:
            row = self.db.session.get(model, doc_id)
            if row is None:
                raise NotFound(f'{collection} {doc_id} not found')
            doc = self._to_doc(row)
            self.db.session.delete(row)
            self.db.session.commit()
        except SQLAlchemyError as e:
            raise self._fail('delete', collection, e) from e
        return doc


def init_store(app, store=None):
    """Attach the document store to the app's extensions."""
    app.extensions['botcafe.store'] = store or DocumentStore()


def get_store():
    """Document store of the current app."""
    return current_app.extensions['botcafe.store']
