from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, List, Optional

from catalog_table.core.controller import TableController
from catalog_table.core.record import RecordId
from catalog_table.ui.ids import IDs

if TYPE_CHECKING:
    from catalog_table.ui.config import AppConfig

logger = logging.getLogger(__name__)


def apply_action(
    ctx: AppConfig,
    store_data: Optional[Dict[str, Any]],
    action: Callable[[TableController], Any],
) -> Dict[str, Any]:
    """
    Pure helper: restore the session controller from its dcc.Store payload,
    run one controller operation on it and return the new payload.
    """
    controller = ctx.load_controller(store_data)
    action(controller)
    return controller.to_dict()


def toggled_categories(before: Iterable[str], after: Iterable[str]) -> List[str]:
    """
    Category keys whose checkbox changed between two checklist values.
    """
    return sorted(set(before or []) ^ set(after or []))


def delete_target(triggered_id: Any, n_clicks: Any) -> Optional[RecordId]:
    """
    Record id of the delete button that fired, or None when the trigger is
    not a real click (e.g. buttons re-created by a table re-render).
    """
    if not isinstance(triggered_id, dict):
        return None
    if triggered_id.get("type") != IDs.Pattern.DELETE_RECORD:
        return None
    if not n_clicks:
        return None
    return triggered_id.get("index")


def dropdown_style(is_open: bool) -> dict:
    return {"display": "block"} if is_open else {"display": "none"}
