"""
Generic CRUD operations shared by the site repositories.

This module provides a `CRUDBase` class with methods to:
- Retrieve a row by ID or list rows with optional ordering.
- Create a row from a Pydantic payload.
- Update selected columns of a row.
- Delete a row by ID.
"""

from typing import Any, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.orm import Session

ModelType = TypeVar("ModelType")


class CRUDBase(Generic[ModelType]):
    """Repository class for the single-table operations every panel needs."""

    model: Type[ModelType]

    def get(self, db: Session, item_id: int) -> Optional[ModelType]:
        """
        Retrieve a row by its ID.

        Args:
            db (Session): The database session.
            item_id (int): The ID of the row.

        Returns:
            Optional[ModelType]: The row if found, otherwise None.
        """
        return db.query(self.model).filter(self.model.id == item_id).first()  # type: ignore[attr-defined]

    def list(self, db: Session, *order_by: Any) -> List[ModelType]:
        """Return every row, ordered by the given columns."""
        query = db.query(self.model)
        if order_by:
            query = query.order_by(*order_by)
        return query.all()

    def count(self, db: Session, *criteria: Any) -> int:
        """Count rows matching the given filter criteria."""
        return db.query(self.model).filter(*criteria).count()

    def create(self, db: Session, item_in: BaseModel) -> ModelType:
        """
        Insert a new row.

        Args:
            db (Session): The database session.
            item_in (BaseModel): The data to be inserted.

        Returns:
            ModelType: The newly created row.
        """
        item = self.model(**item_in.model_dump())
        db.add(item)
        db.commit()
        db.refresh(item)
        return item

    def update(self, db: Session, item: ModelType, **fields: Any) -> ModelType:
        """Set the given columns on `item` and commit."""
        for name, value in fields.items():
            setattr(item, name, value)
        db.add(item)
        db.commit()
        db.refresh(item)
        return item

    def update_by_id(self, db: Session, item_id: int, **fields: Any) -> int:
        """Set the given columns on the row with `item_id`; return rows matched."""
        updated = (
            db.query(self.model)
            .filter(self.model.id == item_id)  # type: ignore[attr-defined]
            .update(fields, synchronize_session="fetch")
        )
        db.commit()
        return updated

    def delete(self, db: Session, item_id: int) -> Optional[ModelType]:
        """
        Delete a row by its ID.

        Args:
            db (Session): The database session.
            item_id (int): The ID of the row to delete.

        Returns:
            Optional[ModelType]: The deleted row if found, otherwise None.
        """
        item = self.get(db, item_id)
        if item:
            db.delete(item)
            db.commit()
            return item
        return None
