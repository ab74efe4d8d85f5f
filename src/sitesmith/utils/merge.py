import copy
import logging
from typing import Dict

logger = logging.getLogger(__name__)


def deep_merge(parent: Dict, child: Dict) -> Dict:
    """
    Recursively merges a child dictionary into a parent dictionary.
        - Dictionaries are merged recursively.
        - Lists are merged by extending unique items.
        - All other types from the child will overwrite the parent.
    Neither argument is modified.
    """
    merged = copy.deepcopy(parent)
    for key, child_value in child.items():
        if key not in merged:
            merged[key] = copy.deepcopy(child_value)
            continue

        parent_value = merged[key]

        if isinstance(parent_value, dict) and isinstance(child_value, dict):
            merged[key] = deep_merge(parent_value, child_value)

        elif isinstance(parent_value, list) and isinstance(child_value, list):
            parent_set = {str(item) for item in parent_value}
            for item in child_value:
                if str(item) not in parent_set:
                    merged[key].append(copy.deepcopy(item))

        else:
            if isinstance(parent_value, (dict, list)) != isinstance(child_value, (dict, list)):
                logger.debug(f"Overriding '{key}' of type {type(parent_value).__name__} with {type(child_value).__name__}")
            merged[key] = copy.deepcopy(child_value)

    return merged


def set_nested(target: Dict, keys: list, value) -> None:
    """Assign `value` at the nested location described by `keys`, creating mappings on the way."""
    node = target
    for key in keys[:-1]:
        child = node.get(key)
        if not isinstance(child, dict):
            child = {}
            node[key] = child
        node = child
    node[keys[-1]] = value
