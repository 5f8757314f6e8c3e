import logging

from fastapi import APIRouter, Depends, HTTPException

from packlist.api.dependencies import get_repository, list_summary, load_list_or_404
from packlist.domain.Category import Category
from packlist.domain.PackingList import PackingList
from packlist.infra.List_Repository import ListRepository
from packlist.logic.reporting.statistics import compute_list_statistics
from packlist.utilities.constants import COPY_SUFFIX
from packlist.utilities.validators import CategoryInput, CopyInput, ListInput

router = APIRouter(prefix='/api')
logger = logging.getLogger(__name__)


# -------------------- Lists --------------------
@router.get('/lists')
def api_lists(repo: ListRepository = Depends(get_repository)):
    lists = [list_summary(pl) for pl in repo.load_all() if not pl.is_template]
    return {'count': len(lists), 'lists': lists}


@router.post('/lists', status_code=201)
def api_create_list(payload: ListInput, repo: ListRepository = Depends(get_repository)):
    packing_list = PackingList(name=payload.name, description=payload.description,
                               tags=payload.tags, is_template=payload.is_template)
    repo.save(packing_list)
    logger.info("Created list %s (%s)", packing_list.id, packing_list.name)
    return packing_list.to_dict()


@router.get('/lists/{list_id}')
def api_get_list(list_id: str, repo: ListRepository = Depends(get_repository)):
    return load_list_or_404(repo, list_id).to_dict()


@router.delete('/lists/{list_id}')
def api_delete_list(list_id: str, repo: ListRepository = Depends(get_repository)):
    if not repo.delete(list_id):
        raise HTTPException(status_code=404, detail='List not found')
    return {"success": True}


@router.get('/lists/{list_id}/stats')
def api_list_stats(list_id: str, repo: ListRepository = Depends(get_repository)):
    packing_list = load_list_or_404(repo, list_id)
    stats = compute_list_statistics(packing_list)
    stats['list_id'] = packing_list.id
    return stats


# -------------------- Copies & templates --------------------
@router.post('/lists/{list_id}/duplicate', status_code=201)
def api_duplicate_list(list_id: str, payload: CopyInput = CopyInput(),
                       repo: ListRepository = Depends(get_repository)):
    source = load_list_or_404(repo, list_id)
    copied = source.copy(payload.name or f"{source.name}{COPY_SUFFIX}")
    if payload.description is not None:
        copied.description = payload.description
    repo.save(copied)
    return copied.to_dict()


@router.post('/lists/{list_id}/template', status_code=201)
def api_save_as_template(list_id: str, payload: CopyInput = CopyInput(),
                         repo: ListRepository = Depends(get_repository)):
    """Store a list's categories and items (all unpacked) as a reusable template."""
    source = load_list_or_404(repo, list_id)
    template = source.copy(payload.name or source.name, is_template=True, unpack=True)
    if payload.description is not None:
        template.description = payload.description
    repo.save(template)
    logger.info("Saved list %s as template %s", source.id, template.id)
    return template.to_dict()


@router.get('/templates')
def api_templates(repo: ListRepository = Depends(get_repository)):
    templates = [list_summary(pl) for pl in repo.load_all() if pl.is_template]
    return {'count': len(templates), 'templates': templates}


@router.post('/templates/{template_id}/apply', status_code=201)
def api_apply_template(template_id: str, payload: CopyInput = CopyInput(),
                       repo: ListRepository = Depends(get_repository)):
    template = load_list_or_404(repo, template_id)
    if not template.is_template:
        raise HTTPException(status_code=400, detail='List is not a template')
    created = template.copy(payload.name or template.name, is_template=False, unpack=True)
    created.template_id = template.id
    repo.save(created)
    return created.to_dict()


# -------------------- Categories --------------------
@router.post('/lists/{list_id}/categories', status_code=201)
def api_add_category(list_id: str, payload: CategoryInput, repo: ListRepository = Depends(get_repository)):
    packing_list = load_list_or_404(repo, list_id)
    category = packing_list.add_category(Category(name=payload.name, color=payload.color, icon=payload.icon))
    repo.save(packing_list)
    return category.to_dict()


@router.delete('/lists/{list_id}/categories/{category_id}')
def api_delete_category(list_id: str, category_id: str, repo: ListRepository = Depends(get_repository)):
    packing_list = load_list_or_404(repo, list_id)
    try:
        removed = packing_list.remove_category(category_id)
    except KeyError:
        raise HTTPException(status_code=404, detail='Category not found')
    repo.save(packing_list)
    return {"success": True, "removed_items": len(removed.items)}
