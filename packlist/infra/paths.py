from packlist.utilities.config import DATA_DIR as _CONFIG_DATA_DIR

# Centralized paths for data files (single source of truth)
DATA_DIR = _CONFIG_DATA_DIR.resolve()
LISTS_FILE = DATA_DIR / 'lists.json'

__all__ = ['DATA_DIR', 'LISTS_FILE']
