"""Register the standard admin routes of a panel on a router."""

from typing import Any, Callable, List, Literal, Type

from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from vuelatour.repositories.site.dependencies import get_db
from vuelatour.services.admin.panel import (
    DUPLICATE_ERROR,
    NOT_FOUND_ERROR,
    AdminPanel,
    CommandResult,
)


def unwrap(result: CommandResult) -> Any:
    """Return the changed item, or raise the HTTP error matching the failure."""
    if result.ok:
        return result.item
    if result.error == NOT_FOUND_ERROR:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.error)
    if result.error == DUPLICATE_ERROR:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=result.error)
    if result.error and result.error.startswith("Error"):
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=result.error)
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.error)


def register_panel_routes(
    router: APIRouter,
    get_panel: Callable[..., AdminPanel],
    response_model: Type[BaseModel],
    create_model: Type[BaseModel],
    update_model: Type[BaseModel],
) -> None:
    """
    Add list/create/update/delete routes, plus toggle and move when the
    panel's rows carry `is_active` and `display_order`.
    """

    @router.get("", response_model=List[response_model])  # type: ignore[valid-type]
    def list_items(db: Session = Depends(get_db), panel: AdminPanel = Depends(get_panel)) -> Any:
        return list(panel.load(db).items)

    @router.post("", response_model=response_model, status_code=status.HTTP_201_CREATED)
    def create_item(
        payload: create_model,  # type: ignore[valid-type]
        db: Session = Depends(get_db),
        panel: AdminPanel = Depends(get_panel),
    ) -> Any:
        return unwrap(panel.create(db, panel.load(db), payload))

    @router.patch("/{item_id}", response_model=response_model)
    def update_item(
        item_id: int,
        payload: update_model,  # type: ignore[valid-type]
        db: Session = Depends(get_db),
        panel: AdminPanel = Depends(get_panel),
    ) -> Any:
        return unwrap(panel.update(db, panel.load(db), item_id, payload))

    @router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_item(
        item_id: int, db: Session = Depends(get_db), panel: AdminPanel = Depends(get_panel)
    ) -> Response:
        unwrap(panel.delete(db, panel.load(db), item_id))
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    if "is_active" in response_model.model_fields:

        @router.post("/{item_id}/toggle", response_model=response_model)
        def toggle_item(
            item_id: int, db: Session = Depends(get_db), panel: AdminPanel = Depends(get_panel)
        ) -> Any:
            return unwrap(panel.toggle_active(db, panel.load(db), item_id))

    if "display_order" in response_model.model_fields:

        @router.post("/{item_id}/move", response_model=List[response_model])  # type: ignore[valid-type]
        def move_item(
            item_id: int,
            direction: Literal["up", "down"],
            db: Session = Depends(get_db),
            panel: AdminPanel = Depends(get_panel),
        ) -> Any:
            state = panel.load(db)
            ids = [item.id for item in state.items]  # type: ignore[attr-defined]
            if item_id not in ids:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_ERROR)
            result = panel.move(db, state, ids.index(item_id), direction)
            unwrap(result)
            return list(result.state.items)
