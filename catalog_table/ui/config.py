from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple

from catalog_table.config.model import GlobalConfig
from catalog_table.core.controller import TableController
from catalog_table.core.record import Record


@dataclass
class AppConfig:
    config_root: Path
    global_config: GlobalConfig
    seed: Tuple[Record, ...] = field(default_factory=tuple)

    def new_controller(self) -> TableController:
        return TableController(self.seed)

    def load_controller(self, data) -> TableController:
        """Rebuild the controller for one browser session from its dcc.Store data."""
        return TableController.from_dict(self.seed, data)
