"""Shared FastAPI dependencies and lookup helpers for the route modules."""
from fastapi import HTTPException

from packlist.domain.PackingList import PackingList
from packlist.infra.List_Repository import ListRepository
from packlist.logic.reporting.statistics import compute_list_statistics


def get_repository() -> ListRepository:
    """Repository bound to the configured data file; overridden in tests."""
    return ListRepository()


def load_list_or_404(repo: ListRepository, list_id: str) -> PackingList:
    packing_list = repo.get(list_id)
    if packing_list is None:
        raise HTTPException(status_code=404, detail='List not found')
    return packing_list


def list_summary(packing_list: PackingList) -> dict:
    stats = compute_list_statistics(packing_list)
    return {
        'id': packing_list.id,
        'name': packing_list.name,
        'description': packing_list.description,
        'tags': packing_list.tags,
        'is_template': packing_list.is_template,
        'template_id': packing_list.template_id,
        'category_count': len(packing_list.categories),
        'total_items': stats['total_items'],
        'packed_items': stats['packed_items'],
        'completion_percentage': stats['completion_percentage'],
        'completed_at': packing_list.completed_at,
        'updated_at': packing_list.updated_at,
    }
