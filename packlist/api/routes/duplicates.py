from typing import Optional
import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from packlist.api.dependencies import get_repository, load_list_or_404
from packlist.infra.List_Repository import ListRepository
from packlist.logic.duplicates.similarity import (
    describe_duplicates,
    find_potential_duplicates,
    group_similar_items,
)
from packlist.utilities.config import DUPLICATE_DISTANCE_THRESHOLD, GROUP_SIMILARITY_THRESHOLD
from packlist.utilities.validators import DuplicateCheckInput

router = APIRouter(prefix='/api/lists/{list_id}/duplicates')
logger = logging.getLogger(__name__)


@router.post('/check')
def api_check_duplicates(list_id: str, payload: DuplicateCheckInput,
                         repo: ListRepository = Depends(get_repository)):
    """Dry run of the duplicate prompt: which existing items look like payload.name."""
    packing_list = load_list_or_404(repo, list_id)
    threshold = DUPLICATE_DISTANCE_THRESHOLD if payload.threshold is None else payload.threshold
    duplicates = find_potential_duplicates(packing_list.all_items(), payload.name, threshold)
    return {
        "name": payload.name,
        "count": len(duplicates),
        "duplicates": describe_duplicates(payload.name, duplicates, limit=len(duplicates)),
    }


@router.get('/groups')
def api_duplicate_groups(list_id: str,
                         threshold: Optional[float] = Query(default=None, description="Minimum similarity in [0, 1]"),
                         repo: ListRepository = Depends(get_repository)):
    """
    Clusters of similar items in a list, for manual merge review.

    Response JSON structure:
        {
          "list_id": <str>,
          "threshold": <float>,
          "count": <int>,
          "groups": [ [ { id, name, category_id, packed }, ... ], ... ]
        }
    """
    packing_list = load_list_or_404(repo, list_id)
    threshold = GROUP_SIMILARITY_THRESHOLD if threshold is None else threshold
    try:
        groups = group_similar_items(packing_list.all_items(), threshold)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    logger.debug("List %s: %d similar groups at threshold %s", list_id, len(groups), threshold)
    return {
        "list_id": packing_list.id,
        "threshold": threshold,
        "count": len(groups),
        "groups": [
            [{"id": i.id, "name": i.name, "category_id": i.category_id, "packed": i.packed} for i in group]
            for group in groups
        ],
    }
