import fnmatch
import logging
from typing import Dict

from ..abstractions import Step
from ..datacls import StaticFile

logger = logging.getLogger(__name__)


class Load(Step):
    """Collects static files from the themes then the site; the site wins on conflicts."""

    name = "Loading static files"

    def can_process(self) -> bool:
        return self.config.model.static.load

    def process(self) -> None:
        static_dir = self.config.model.static.dir
        sources = [theme / static_dir for theme in reversed(self.context.themes)]
        sources.append(self.config.static_path)
        exclude = self.config.model.static.exclude

        files: Dict[str, StaticFile] = {}
        for source in sources:
            for file in self.fs.files(source):
                if any(fnmatch.fnmatch(file.name, pattern) for pattern in exclude):
                    continue
                path = file.relative_to(source).as_posix()
                files[path] = StaticFile(source=file, path=path, size=self.fs.size(file))
        self.builder.static_files = files
        logger.info(f"[Static] {len(files)} static file(s) found.")


class Copy(Step):
    """Copies static files into the output directory."""

    name = "Copying static files"

    def init(self, options) -> None:
        super().init(options)
        self.dry_run = options.dry_run

    def can_process(self) -> bool:
        return not self.dry_run

    def process(self) -> None:
        output_path = self.config.output_path
        if not self.builder.static_files:
            logger.info("[Static] No static file to copy.")
            return
        for static_file in self.builder.static_files.values():
            self.fs.copy(static_file.source, output_path / static_file.path)
        logger.info(f"[Static] {len(self.builder.static_files)} file(s) copied to '{output_path}'.")
