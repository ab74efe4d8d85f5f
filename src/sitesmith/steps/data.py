import json
import logging
from typing import Any, Dict

import yaml

from ..abstractions import Step
from ..exceptions import BuildError
from ..utils import set_nested

logger = logging.getLogger(__name__)


class Load(Step):
    """
    Loads structured data files. `data/authors/jane.yml` becomes
    `data["authors"]["jane"]`.
    """

    name = "Loading data"

    def can_process(self) -> bool:
        return self.config.model.data.load

    def process(self) -> None:
        data_path = self.config.data_path
        if not self.fs.is_dir(data_path):
            logger.debug(f"[Data] No data directory at '{data_path}'")
            self.builder.data = {}
            return
        extensions = {f".{ext.lower().lstrip('.')}" for ext in self.config.model.data.ext}
        data: Dict[str, Any] = {}
        count = 0
        for file in self.fs.files(data_path):
            if file.suffix.lower() not in extensions:
                continue
            keys = list(file.relative_to(data_path).with_suffix("").parts)
            set_nested(data, keys, self._parse(file))
            count += 1
        self.builder.data = data
        logger.info(f"[Data] {count} data file(s) loaded.")

    def _parse(self, file) -> Any:
        content = self.fs.read_text(file)
        try:
            if file.suffix.lower() == ".json":
                return json.loads(content)
            return yaml.safe_load(content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise BuildError(f"Can't parse data file '{file}': {e}") from e
