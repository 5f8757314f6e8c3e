"""Packing list repository (JSON file persistence)."""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import List, Optional

from packlist.domain.PackingList import PackingList
from packlist.infra import paths

logger = logging.getLogger(__name__)


class ListRepository:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else paths.LISTS_FILE

    def _read(self) -> list:
        if not self.path.exists():
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error("Lists file %s is not valid JSON: %s", self.path, e)
            return []
        if not isinstance(data, list):
            logger.error("Lists file %s does not hold a JSON list", self.path)
            return []
        return data

    def _atomic_write(self, data: list) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=".lists_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(data, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, self.path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    def load_all(self) -> List[PackingList]:
        return [PackingList.from_dict(entry) for entry in self._read()]

    def get(self, list_id: str) -> Optional[PackingList]:
        for entry in self._read():
            if entry.get("id") == list_id:
                return PackingList.from_dict(entry)
        return None

    def save(self, packing_list: PackingList) -> PackingList:
        """Insert or replace a list by id."""
        store = self._read()
        packing_list.touch()
        data = packing_list.to_dict()
        for i, entry in enumerate(store):
            if entry.get("id") == packing_list.id:
                store[i] = data
                break
        else:
            store.append(data)
        self._atomic_write(store)
        logger.debug("Saved list %s (%s)", packing_list.id, packing_list.name)
        return packing_list

    def delete(self, list_id: str) -> bool:
        store = self._read()
        remaining = [entry for entry in store if entry.get("id") != list_id]
        if len(remaining) == len(store):
            return False
        self._atomic_write(remaining)
        logger.info("Deleted list %s", list_id)
        return True
