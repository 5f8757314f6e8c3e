import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from packlist.api.dependencies import get_repository, load_list_or_404
from packlist.domain.Item import Item
from packlist.events.event_helpers import publish_duplicate_detected, publish_list_completed
from packlist.infra.List_Repository import ListRepository
from packlist.logic.duplicates.similarity import describe_duplicates, find_potential_duplicates
from packlist.utilities.config import DUPLICATE_DISTANCE_THRESHOLD
from packlist.utilities.validators import ItemInput, ItemUpdateInput, MoveItemInput

router = APIRouter(prefix='/api/lists/{list_id}')
logger = logging.getLogger(__name__)


def _item_or_404(packing_list, item_id: str):
    try:
        return packing_list.find_item(item_id)
    except KeyError:
        raise HTTPException(status_code=404, detail='Item not found')


@router.post('/categories/{category_id}/items', status_code=201)
def api_add_item(list_id: str, category_id: str, payload: ItemInput,
                 repo: ListRepository = Depends(get_repository)):
    """Add an item to a category.

    Before inserting, the name is checked against every item in the list.
    When likely duplicates exist and force is false, nothing is saved and a 409
    carries the candidates so the client can offer add-anyway / use-existing / cancel.
    """
    packing_list = load_list_or_404(repo, list_id)
    if packing_list.find_category(category_id) is None:
        raise HTTPException(status_code=404, detail='Category not found')

    if not payload.force:
        duplicates = find_potential_duplicates(packing_list.all_items(), payload.name, DUPLICATE_DISTANCE_THRESHOLD)
        if duplicates:
            described = describe_duplicates(payload.name, duplicates)
            logger.info("Item %r in list %s has %d potential duplicates", payload.name, list_id, len(duplicates))
            publish_duplicate_detected(list_id, payload.name, described)
            return JSONResponse(status_code=409, content={
                "error": "Potential duplicate detected",
                "name": payload.name,
                "count": len(duplicates),
                "duplicates": described,
            })

    item = Item(name=payload.name, quantity=payload.quantity, priority=payload.priority,
                notes=payload.notes, description=payload.description, packed=payload.packed)
    was_complete = packing_list.is_complete()
    packing_list.add_item(category_id, item)
    repo.save(packing_list)
    if packing_list.is_complete() and not was_complete:
        publish_list_completed(packing_list)
    return item.to_dict()


@router.patch('/items/{item_id}')
def api_update_item(list_id: str, item_id: str, payload: ItemUpdateInput,
                    repo: ListRepository = Depends(get_repository)):
    packing_list = load_list_or_404(repo, list_id)
    _, item = _item_or_404(packing_list, item_id)
    was_complete = packing_list.is_complete()
    try:
        item.update(**payload.model_dump(exclude_unset=True, exclude_none=True))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    packing_list.refresh_completion()
    repo.save(packing_list)
    if packing_list.is_complete() and not was_complete:
        publish_list_completed(packing_list)
    return item.to_dict()


@router.post('/items/{item_id}/toggle')
def api_toggle_item(list_id: str, item_id: str, repo: ListRepository = Depends(get_repository)):
    packing_list = load_list_or_404(repo, list_id)
    _item_or_404(packing_list, item_id)
    was_complete = packing_list.is_complete()
    item = packing_list.toggle_item_packed(item_id)
    repo.save(packing_list)
    if packing_list.is_complete() and not was_complete:
        logger.info("List %s fully packed", list_id)
        publish_list_completed(packing_list)
    return {"item": item.to_dict(), "list_completed": packing_list.is_complete()}


@router.post('/items/{item_id}/move')
def api_move_item(list_id: str, item_id: str, payload: MoveItemInput,
                  repo: ListRepository = Depends(get_repository)):
    packing_list = load_list_or_404(repo, list_id)
    _item_or_404(packing_list, item_id)
    if packing_list.find_category(payload.category_id) is None:
        raise HTTPException(status_code=404, detail='Category not found')
    item = packing_list.move_item(item_id, payload.category_id)
    repo.save(packing_list)
    return item.to_dict()


@router.delete('/items/{item_id}')
def api_delete_item(list_id: str, item_id: str, repo: ListRepository = Depends(get_repository)):
    packing_list = load_list_or_404(repo, list_id)
    _item_or_404(packing_list, item_id)
    packing_list.remove_item(item_id)
    repo.save(packing_list)
    return {"success": True}
