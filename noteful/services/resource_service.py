"""
Noteful API: Generic Resource Service
=======================================

What:  The CRUD contract shared by folders and notes.
How:   One ResourceService instance per resource, configured with its ORM
       model, display label and field lists. Every operation takes the
       AsyncSession explicitly.
Who:   Called by the route handlers in noteful.routes.

Request Flow (item-scoped routes):
    ┌──────────┐    ┌──────────────┐    ┌────────────┐    ┌────────────┐
    │  Route   │───▶│  lookup()    │───▶│ read/update│───▶│  sanitize  │
    │          │    │  → Resolved- │    │ /delete    │    │  (reads)   │
    └──────────┘    │    Record    │    └────────────┘    └────────────┘
                    └──────────────┘
    lookup() raises NotFoundError before any verb-specific work runs, and
    its result is handed to the verb handler so the row is fetched once.

Error Handling Strategy:
    SQLAlchemyError from any statement is logged and re-raised as StoreFault.
    ValidationError and NotFoundError propagate untouched.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Type

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.database import Base
from noteful.exceptions import NotFoundError, StoreFault, ValidationError
from noteful.services.sanitizer import sanitize_record
from noteful.services.validation import pick_present, require_any_field, require_fields

logger = logging.getLogger(__name__)

# Values an INTEGER primary or foreign key column can hold
ID_RANGE = range(-(2**31), 2**31)


@dataclass(frozen=True)
class ResolvedRecord:
    """
    Outcome of a successful existence lookup.

    Produced by ResourceService.lookup() and passed to read/update/delete.
    """
    resource: str
    record_id: int
    record: Any


class ResourceService:
    """
    CRUD operations for one table keyed by an integer `id`.

    Args:
        model:             SQLAlchemy model class
        label:             Resource name used in messages ("Folder", "Note")
        required_fields:   Must be present and non-blank on create
        optional_fields:   Accepted on create when supplied
        blank_fields:      Required fields that may be an empty string
        mutable_fields:    Accepted on partial update
        text_fields:       HTML-escaped in every response body
        patch_hint_fields: Fields named in the empty-PATCH error message
        references:        Foreign-key field → service of the referenced
                           resource; checked before insert/update
    """

    def __init__(
        self,
        model: Type[Base],
        label: str,
        *,
        required_fields: Sequence[str],
        mutable_fields: Sequence[str],
        text_fields: Sequence[str],
        optional_fields: Sequence[str] = (),
        blank_fields: Sequence[str] = (),
        patch_hint_fields: Optional[Sequence[str]] = None,
        references: Optional[Mapping[str, "ResourceService"]] = None,
    ):
        self.model = model
        self.label = label
        self.required_fields = tuple(required_fields)
        self.optional_fields = tuple(optional_fields)
        self.blank_fields = tuple(blank_fields)
        self.mutable_fields = tuple(mutable_fields)
        self.text_fields = tuple(text_fields)
        self.patch_hint_fields = tuple(patch_hint_fields or mutable_fields)
        self.references = dict(references or {})

    # ── Serialization ─────────────────────────────────────────────────────

    def to_dict(self, row: Any) -> Dict[str, Any]:
        """Column values of `row`, keyed by column name, in table order."""
        return {column.key: getattr(row, column.key) for column in self.model.__table__.columns}

    def present(self, row: Any) -> Dict[str, Any]:
        """The response-body form of a row: all columns, free text escaped."""
        return sanitize_record(self.to_dict(row), self.text_fields)

    # ── Collection operations ─────────────────────────────────────────────

    async def list(self, db: AsyncSession) -> List[Dict[str, Any]]:
        """All rows in insertion (id) order, sanitized."""
        try:
            result = await db.execute(select(self.model).order_by(self.model.id))
            rows = result.scalars().all()
        except SQLAlchemyError as e:
            raise self._fault("list", e)
        return [self.present(row) for row in rows]

    async def create(self, db: AsyncSession, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Validate and insert a new row.

        Only required and optional fields are read from `payload`; anything
        else is ignored. The returned record includes the store-assigned id
        and server defaults (e.g. a note's `modified`).

        Raises:
            ValidationError: a required field is missing, or a referenced
                             row does not exist
            StoreFault:      the insert failed
        """
        fields = require_fields(payload, self.required_fields, allow_blank=self.blank_fields)
        fields.update(pick_present(payload, self.optional_fields))
        await self._check_references(db, fields)

        try:
            row = self.model(**fields)
            db.add(row)
            await db.flush()
            # Load server-side defaults generated by the insert
            await db.refresh(row)
        except SQLAlchemyError as e:
            raise self._fault("create", e)

        logger.info("%s %s created", self.label, row.id)
        return self.present(row)

    # ── Item operations ───────────────────────────────────────────────────

    async def lookup(self, db: AsyncSession, record_id: int) -> ResolvedRecord:
        """
        Resolve `record_id` to a row.

        Ids outside the column range cannot name a row and are reported as
        not found without querying.

        Raises:
            NotFoundError: no row has this id ("<Label> doesn't exist")
            StoreFault:    the select failed
        """
        if record_id not in ID_RANGE:
            raise NotFoundError(resource=self.label, resource_id=record_id)

        try:
            result = await db.execute(select(self.model).where(self.model.id == record_id))
            row = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise self._fault("lookup", e, record_id=record_id)

        if row is None:
            raise NotFoundError(resource=self.label, resource_id=record_id)
        return ResolvedRecord(resource=self.label, record_id=record_id, record=row)

    def read(self, resolved: ResolvedRecord) -> Dict[str, Any]:
        return self.present(resolved.record)

    async def update(
        self,
        db: AsyncSession,
        resolved: ResolvedRecord,
        payload: Mapping[str, Any],
    ) -> None:
        """
        Apply a partial update to a resolved row.

        Only mutable fields with truthy values are written; the rest of the
        row keeps its stored values. Nothing is returned.

        Raises:
            ValidationError: no updatable field supplied, or a referenced
                             row does not exist
            StoreFault:      the update failed
        """
        changes = require_any_field(payload, self.mutable_fields, self.patch_hint_fields)
        await self._check_references(db, changes)

        try:
            await db.execute(
                update(self.model)
                .where(self.model.id == resolved.record_id)
                .values(**changes)
            )
        except SQLAlchemyError as e:
            raise self._fault("update", e, record_id=resolved.record_id)

        logger.info("%s %s updated: %s", self.label, resolved.record_id, sorted(changes))

    async def delete(self, db: AsyncSession, resolved: ResolvedRecord) -> None:
        try:
            await db.execute(delete(self.model).where(self.model.id == resolved.record_id))
        except SQLAlchemyError as e:
            raise self._fault("delete", e, record_id=resolved.record_id)

        logger.info("%s %s deleted", self.label, resolved.record_id)

    # ── Helpers ───────────────────────────────────────────────────────────

    async def exists(self, db: AsyncSession, record_id: int) -> bool:
        if record_id not in ID_RANGE:
            return False
        try:
            result = await db.execute(select(self.model.id).where(self.model.id == record_id))
        except SQLAlchemyError as e:
            raise self._fault("exists", e, record_id=record_id)
        return result.scalar_one_or_none() is not None

    async def _check_references(self, db: AsyncSession, fields: Mapping[str, Any]) -> None:
        """Fail with 400 when a supplied foreign key names a missing row."""
        for field, target in self.references.items():
            value = fields.get(field)
            if value is None:
                continue
            if not await target.exists(db, value):
                raise ValidationError(
                    message=f"{target.label} '{value}' referenced by '{field}' doesn't exist",
                    field=field,
                )

    def _fault(self, operation: str, exc: Exception, **context: Any) -> StoreFault:
        """Log a store failure with its detail and build the client-safe fault."""
        logger.error(
            "Database error during %s %s: %s",
            self.label.lower(),
            operation,
            exc,
            exc_info=True,
        )
        return StoreFault(
            context={
                "resource": self.label,
                "operation": operation,
                "error_type": type(exc).__name__,
                **context,
            }
        )
