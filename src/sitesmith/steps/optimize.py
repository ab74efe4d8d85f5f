import gzip
import io
import logging
import re
from abc import abstractmethod
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from .. import constants
from ..abstractions import Step
from ..utils import convert_memory

logger = logging.getLogger(__name__)


class Optimize(Step):
    """
    Base class of the output optimizers. Each subclass handles one kind of
    file (`type`) found in the output directory; a result is only written
    back when it is smaller than the original.
    """

    type: str = ""
    text: bool = True

    def init(self, options) -> None:
        super().init(options)
        self.dry_run = options.dry_run

    @property
    def name(self) -> str:
        return f"Optimizing {self.type}"

    def can_process(self) -> bool:
        return (
            not self.dry_run
            and self.config.is_optimize_enabled(self.type)
        )

    def process(self) -> None:
        if not self.fs.is_dir(self.config.output_path):
            logger.info(f"[Optimize] Nothing to optimize, '{self.config.output_path}' does not exist.")
            return
        extensions = {f".{ext.lower().lstrip('.')}" for ext in getattr(self.config.model.optimize, self.type).ext}
        files = [f for f in self.fs.files(self.config.output_path) if f.suffix.lower() in extensions]

        optimized = 0
        saved = 0
        for file in files:
            data = self.fs.read_bytes(file)
            try:
                result = self.optimize(data, file)
            except UnicodeDecodeError as e:
                logger.warning(f"[Optimize] Skipping '{file}', not UTF-8: {e}")
                result = None
            if result is not None and len(result) < len(data):
                self.fs.write_bytes(file, result)
                saved += len(data) - len(result)
                optimized += 1
                data = result
            if self.text and self.config.model.optimize.gzip:
                self._precompress(file, data)

        logger.info(
            f"[Optimize] {self.type}: {optimized}/{len(files)} file(s) optimized, "
            f"{convert_memory(saved)} saved."
        )

    @abstractmethod
    def optimize(self, data: bytes, file: Path) -> Optional[bytes]:
        """Return the optimized content, or None to keep the file unchanged."""
        pass

    def _precompress(self, file: Path, data: bytes) -> None:
        """Write a `.gz` sibling for servers that serve precompressed files."""
        if len(data) < constants.GZIP_MIN_BYTES:
            return
        compressed = gzip.compress(data, compresslevel=9)
        if len(compressed) < len(data):
            self.fs.write_bytes(file.with_name(file.name + ".gz"), compressed)


# Blocks whose whitespace is significant
_html_protected = re.compile(r"(<(pre|textarea|script|style)\b.*?</\2\s*>)", re.S | re.I)
_html_comment = re.compile(r"<!--(?!\[if).*?-->", re.S)
_whitespace = re.compile(r"\s+")


class Html(Optimize):
    type = "html"

    def optimize(self, data: bytes, file: Path) -> Optional[bytes]:
        text = data.decode("utf-8")
        parts = _html_protected.split(text)
        out = []
        # split() yields: text, whole block, tag name, text, ...
        for i in range(0, len(parts), 3):
            chunk = _html_comment.sub("", parts[i])
            chunk = _whitespace.sub(" ", chunk)
            out.append(chunk)
            if i + 1 < len(parts):
                out.append(parts[i + 1])
        return "".join(out).strip().encode("utf-8")


# Quoted strings are captured; comments match without a group and are dropped
_css_tokens = re.compile(r"""("(?:\\.|[^"\\])*"|'(?:\\.|[^'\\])*')|/\*(?!!).*?\*/""", re.S)
_css_punctuation = re.compile(r"\s*([{};,>])\s*")


class Css(Optimize):
    type = "css"

    def optimize(self, data: bytes, file: Path) -> Optional[bytes]:
        out = []
        code = []
        for i, piece in enumerate(_css_tokens.split(data.decode("utf-8"))):
            if i % 2 == 0:
                code.append(piece)
            elif piece is not None:
                out.append(self._minify("".join(code)))
                out.append(piece)
                code = []
        out.append(self._minify("".join(code)))
        return "".join(out).strip().encode("utf-8")

    @staticmethod
    def _minify(code: str) -> str:
        code = _whitespace.sub(" ", code)
        return _css_punctuation.sub(r"\1", code).replace(";}", "}")


class Js(Optimize):
    """
    Scripts are never rewritten: whitespace is significant inside template
    literals and regexes. They are only precompressed when `gzip` is on.
    """

    type = "js"

    def optimize(self, data: bytes, file: Path) -> Optional[bytes]:
        return None


class Images(Optimize):
    type = "images"
    text = False

    FORMATS = {"JPEG": {"quality": 85}, "PNG": {}, "WEBP": {"quality": 85, "method": 4}}

    def optimize(self, data: bytes, file: Path) -> Optional[bytes]:
        try:
            img = Image.open(io.BytesIO(data))
            fmt = img.format
            if fmt not in self.FORMATS:
                return None
            buf = io.BytesIO()
            img.save(buf, format=fmt, optimize=True, **self.FORMATS[fmt])
        except (UnidentifiedImageError, OSError, ValueError) as e:
            logger.warning(f"[Optimize] Image optimization of '{file}' failed: {e}. Using original.")
            return None
        return buf.getvalue()
