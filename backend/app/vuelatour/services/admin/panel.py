"""
Command-style admin panels.

Every mutation takes the panel's current `PanelState` and an intent and
returns a `CommandResult`. The result only carries a new state once the
database write succeeded; on failure it carries the error message and the
state it was given, untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from vuelatour.logger_config import get_logger
from vuelatour.repositories.site.crud.base_crud import CRUDBase

logger = get_logger(__name__)

ItemT = TypeVar("ItemT", bound=BaseModel)

SAVE_ERROR = "Error al guardar"
DELETE_ERROR = "Error al eliminar"
UPDATE_ERROR = "Error al actualizar"
REORDER_ERROR = "Error al reordenar"
NOT_FOUND_ERROR = "Elemento no encontrado"
DUPLICATE_ERROR = "Ya existe un elemento con esa clave"


@dataclass(frozen=True)
class PanelState(Generic[ItemT]):
    """Local mirror of the rows a panel shows."""

    items: Tuple[ItemT, ...] = ()

    def find(self, item_id: int) -> Optional[ItemT]:
        for item in self.items:
            if item.id == item_id:  # type: ignore[attr-defined]
                return item
        return None

    def replace(self, updated: ItemT) -> "PanelState[ItemT]":
        item_id = updated.id  # type: ignore[attr-defined]
        return PanelState(
            tuple(updated if item.id == item_id else item for item in self.items)  # type: ignore[attr-defined]
        )

    def without(self, item_id: int) -> "PanelState[ItemT]":
        return PanelState(tuple(item for item in self.items if item.id != item_id))  # type: ignore[attr-defined]


@dataclass(frozen=True)
class CommandResult(Generic[ItemT]):
    """Outcome of one admin command."""

    state: PanelState[ItemT]
    error: Optional[str] = None
    item: Optional[ItemT] = field(default=None)

    @property
    def ok(self) -> bool:
        return self.error is None


class AdminPanel(Generic[ItemT]):
    """Create/update/delete/toggle/reorder over one table."""

    orderable = False

    def __init__(self, repository: CRUDBase, schema: Type[ItemT]) -> None:
        self.repository = repository
        self.schema = schema

    def sort_key(self, item: Any) -> Any:
        if self.orderable:
            return (item.display_order, item.id)
        return item.id

    def _sorted(self, items: Any) -> Tuple[ItemT, ...]:
        return tuple(sorted(items, key=self.sort_key))

    def _fail(self, db: Session, state: PanelState[ItemT], message: str, error: Exception) -> CommandResult[ItemT]:
        db.rollback()
        logger.error("%s (%s): %s", message, self.repository.model.__tablename__, error)
        return CommandResult(state=state, error=message)

    def _rows(self, db: Session) -> Any:
        return self.repository.list(db)

    def load(self, db: Session) -> PanelState[ItemT]:
        """Read the table into a fresh panel state."""
        return PanelState(self._sorted(self.schema.model_validate(row) for row in self._rows(db)))

    def prepare_create(self, state: PanelState[ItemT], payload: BaseModel) -> BaseModel:
        """Hook to fill defaults before inserting."""
        if self.orderable and "display_order" not in payload.model_fields_set:
            return payload.model_copy(update={"display_order": len(state.items)})
        return payload

    def create(self, db: Session, state: PanelState[ItemT], payload: BaseModel) -> CommandResult[ItemT]:
        """Insert a row and append it to the panel."""
        try:
            row = self.repository.create(db, self.prepare_create(state, payload))
        except IntegrityError as e:
            return self._fail(db, state, DUPLICATE_ERROR, e)
        except SQLAlchemyError as e:
            return self._fail(db, state, SAVE_ERROR, e)
        item = self.schema.model_validate(row)
        return CommandResult(state=PanelState(self._sorted(state.items + (item,))), item=item)

    def update(
        self, db: Session, state: PanelState[ItemT], item_id: int, payload: BaseModel
    ) -> CommandResult[ItemT]:
        """Write the fields set on `payload` to the row with `item_id`."""
        return self.write(db, state, item_id, SAVE_ERROR, **payload.model_dump(exclude_unset=True))

    def write(
        self, db: Session, state: PanelState[ItemT], item_id: int, message: str, **fields: Any
    ) -> CommandResult[ItemT]:
        try:
            row = self.repository.get(db, item_id)
            if row is None:
                return CommandResult(state=state, error=NOT_FOUND_ERROR)
            row = self.repository.update(db, row, **fields)
        except IntegrityError as e:
            return self._fail(db, state, DUPLICATE_ERROR, e)
        except SQLAlchemyError as e:
            return self._fail(db, state, message, e)
        item = self.schema.model_validate(row)
        new_state = state.replace(item) if state.find(item_id) else PanelState(state.items + (item,))
        return CommandResult(state=PanelState(self._sorted(new_state.items)), item=item)

    def delete(self, db: Session, state: PanelState[ItemT], item_id: int) -> CommandResult[ItemT]:
        try:
            deleted = self.repository.delete(db, item_id)
        except SQLAlchemyError as e:
            return self._fail(db, state, DELETE_ERROR, e)
        if deleted is None:
            return CommandResult(state=state, error=NOT_FOUND_ERROR)
        return CommandResult(state=state.without(item_id))

    def toggle_active(self, db: Session, state: PanelState[ItemT], item_id: int) -> CommandResult[ItemT]:
        """Flip `is_active` on the row."""
        current = state.find(item_id)
        if current is None:
            return CommandResult(state=state, error=NOT_FOUND_ERROR)
        return self.write(
            db, state, item_id, UPDATE_ERROR, is_active=not current.is_active  # type: ignore[attr-defined]
        )

    def move(self, db: Session, state: PanelState[ItemT], index: int, direction: str) -> CommandResult[ItemT]:
        """
        Swap the `display_order` of the item at `index` with its neighbour.

        Args:
            db (Session): The database session.
            state (PanelState): Current panel state, sorted by display order.
            index (int): Position of the item to move.
            direction (str): `up` or `down`.

        Returns:
            CommandResult: The swapped state, or the original state with an
            error when either write failed. The first write is not undone when
            the second one fails.
        """
        if not self.orderable:
            raise TypeError(f"{type(self).__name__} rows have no display order")
        if direction not in ("up", "down"):
            raise ValueError(f"Unknown direction: {direction}")

        items = self._sorted(state.items)
        target = index - 1 if direction == "up" else index + 1
        if index < 0 or index >= len(items) or target < 0 or target >= len(items):
            return CommandResult(state=state)

        current, neighbour = items[index], items[target]
        current_order = current.display_order  # type: ignore[attr-defined]
        neighbour_order = neighbour.display_order  # type: ignore[attr-defined]
        try:
            if not self.repository.update_by_id(db, current.id, display_order=neighbour_order):  # type: ignore[attr-defined]
                return CommandResult(state=state, error=NOT_FOUND_ERROR)
            if not self.repository.update_by_id(db, neighbour.id, display_order=current_order):  # type: ignore[attr-defined]
                return CommandResult(state=state, error=NOT_FOUND_ERROR)
        except SQLAlchemyError as e:
            return self._fail(db, state, REORDER_ERROR, e)

        swapped = state.replace(current.model_copy(update={"display_order": neighbour_order}))
        swapped = swapped.replace(neighbour.model_copy(update={"display_order": current_order}))
        return CommandResult(state=PanelState(self._sorted(swapped.items)))
