import logging
from pathlib import Path, PurePosixPath
from typing import Any, Dict, List, Optional, Tuple

from .. import constants
from ..abstractions import Step
from ..collection import Page, PageCollection
from ..converter import split_front_matter, parse_front_matter, convert_body
from ..exceptions import FrontMatterError, LayoutNotFoundError, PageNotFoundError
from ..generators import GeneratorManager
from ..renderer import JinjaRenderer
from ..utils import slugify
from .. import version

logger = logging.getLogger(__name__)


class Load(Step):
    """Lists the content files, or the single one asked for with the `page` option."""

    name = "Loading pages"

    def init(self, options) -> None:
        super().init(options)
        self.page = options.page

    def process(self) -> None:
        pages_path = self.config.pages_path
        if not self.fs.is_dir(pages_path):
            logger.warning(f"[Pages] Pages directory '{pages_path}' not found.")
            self.builder.source_files = []
            return

        extensions = {f".{ext.lower().lstrip('.')}" for ext in self.config.model.pages.ext}
        files = [
            file for file in self.fs.files(pages_path)
            if file.suffix.lower() in extensions
            and not any(part.startswith(".") for part in file.relative_to(pages_path).parts)
        ]

        if self.page:
            wanted = PurePosixPath(self.page.strip("/"))
            files = [
                file for file in files
                if PurePosixPath(file.relative_to(pages_path).as_posix()) in (wanted, wanted.with_suffix(file.suffix))
            ]
            if not files:
                raise PageNotFoundError(f"Page '{self.page}' not found in '{pages_path}'.")

        logger.info(f"[Pages] {len(files)} content file(s) found.")
        self.builder.source_files = files


class Create(Step):
    """Starts this build's pages collection, one page per content file."""

    name = "Creating pages"

    def process(self) -> None:
        pages = PageCollection()
        pages_path = self.config.pages_path
        for file in self.builder.source_files:
            page_id, language = self._identify(file.relative_to(pages_path))
            page = Page(
                id=page_id,
                file=file,
                language=language,
                raw=self.fs.read_text(file),
            )
            if page_id in (constants.INDEX_BASENAME, f"{language}/{constants.INDEX_BASENAME}"):
                page.type = constants.PAGE_TYPE_HOMEPAGE
            pages.add(page)
        self.builder.pages = pages
        logger.debug(f"[Pages] {len(pages)} page(s) created.")

    def _identify(self, relative: Path) -> Tuple[str, str]:
        """
        Page id and language from a content path: `blog/post.fr.md` is page
        `fr/blog/post` in French when `fr` is a configured language.
        """
        stem = relative.with_suffix("")
        language = self.config.language
        suffix = stem.suffix.lstrip(".")
        if suffix and suffix in self.config.languages:
            language = suffix
            stem = stem.with_suffix("")
        page_id = slugify(stem.as_posix()) or constants.INDEX_BASENAME
        if language != self.config.language:
            page_id = f"{language}/{page_id}"
        return page_id, language


class Convert(Step):
    """
    Parses front matter and converts bodies to HTML. Drafts are dropped
    unless the `drafts` option is set; pages with broken front matter are
    reported and dropped.
    """

    name = "Converting pages"

    def init(self, options) -> None:
        super().init(options)
        self.drafts = options.drafts

    def process(self) -> None:
        pages = self.builder.pages
        if not len(pages):
            logger.info("[Pages] No page to convert.")
            return
        converted = 0
        for page in pages:
            if page.virtual or page.file is None:
                continue
            front_matter, body = split_front_matter(page.raw)
            try:
                page.variables = parse_front_matter(front_matter)
            except FrontMatterError as e:
                logger.error(f"[Pages] Unable to convert front matter of page '{page.id}': {e}")
                pages.remove(page.id)
                continue

            if page.is_draft and not self.drafts:
                logger.debug(f"[Pages] Skipping draft '{page.id}'")
                pages.remove(page.id)
                continue
            if page.variables.get("published") is False:
                pages.remove(page.id)
                continue

            page.content = body
            page.html = convert_body(body, page.file.suffix)
            if page.variables.get("layout"):
                page.layout = str(page.variables["layout"])
            if page.variables.get("slug"):
                self._rename(pages, page, slugify(str(page.variables["slug"])))
            converted += 1
        logger.info(f"[Pages] {converted} page(s) converted.")

    @staticmethod
    def _rename(pages: PageCollection, page: Page, slug: str) -> None:
        """Apply a front matter `slug`: it replaces the last segment of the page id."""
        old_id = page.id
        head, _, _ = old_id.rpartition("/")
        new_id = f"{head}/{slug}" if head else slug
        if new_id == old_id:
            return
        if pages.has(new_id):
            logger.error(f"[Pages] Can't apply slug of page '{old_id}': page '{new_id}' already exists.")
            return
        page.id = new_id
        pages.replace(old_id, page)


class Generate(Step):
    """Runs the configured generators and adds the virtual pages they return."""

    name = "Generating pages"

    def can_process(self) -> bool:
        return bool(self.config.model.generators)

    def process(self) -> None:
        if self.builder.generators is None:
            self.builder.generators = GeneratorManager(self.builder)
        pages = self.builder.pages
        added = 0
        for page in self.builder.generators.generate():
            if pages.has(page.id):
                if not pages.get(page.id).virtual:
                    logger.debug(f"[Pages] Page '{page.id}' exists, generated page ignored.")
                    continue
                pages.replace(page.id, page)
            else:
                pages.add(page)
            added += 1
        logger.info(f"[Pages] {added} page(s) generated.")


class Render(Step):
    """Initializes the template renderer and renders every page."""

    name = "Rendering pages"

    def process(self) -> None:
        if not len(self.builder.pages):
            logger.info("[Pages] No page to render.")
            return
        layouts = [self.config.layouts_path]
        layouts += [theme / self.config.model.layouts.dir for theme in self.context.themes]
        renderer = JinjaRenderer(layouts, baseurl=self.config.baseurl)
        renderer.add_global("site", self._site())
        self.builder.renderer = renderer

        rendered = 0
        for page in self.builder.pages.renderable():
            layout = self._layout(page)
            page.rendered = renderer.render(layout, {
                "page": page,
                "pages": self._list(page),
                "menus": self.builder.menus.get(page.language),
            })
            rendered += 1
        logger.info(f"[Pages] {rendered} page(s) rendered.")

    def _site(self) -> Dict[str, Any]:
        model = self.config.model
        return {
            **(model.model_extra or {}),
            "title": model.title,
            "baseurl": model.baseurl,
            "language": model.language,
            "languages": model.languages,
            "config": self.config.as_dict(),
            "data": self.builder.data,
            "pages": self.builder.pages,
            "taxonomies": self.builder.taxonomies,
            "menus": self.builder.menus,
            "version": version.get_version(),
        }

    def _layout(self, page: Page) -> str:
        candidates: List[Optional[str]] = [page.layout]
        if page.type == constants.PAGE_TYPE_PAGE and "/" in page.id:
            candidates.append(f"{page.id.split('/', 1)[0]}/page.html")
        candidates.append(constants.DEFAULT_LAYOUTS.get(page.type))
        for candidate in candidates:
            if candidate and self.builder.renderer.has_template(candidate):
                return candidate
        raise LayoutNotFoundError(
            f"No layout found for page '{page.id}' (tried {[c for c in candidates if c]})."
        )

    def _list(self, page: Page) -> List[Page]:
        """Pages listed by list-like pages: the homepage, vocabularies and terms."""
        pages = self.builder.pages
        if page.type == constants.PAGE_TYPE_HOMEPAGE:
            listed = [
                p for p in pages
                if p.type == constants.PAGE_TYPE_PAGE and not p.virtual and p.language == page.language
            ]
            return sorted(listed, key=lambda p: (p.weight, p.title))
        if page.type == constants.PAGE_TYPE_TERM and self.builder.taxonomies is not None:
            vocabulary = self.builder.taxonomies.get(page.variables["vocabulary"])
            return vocabulary.get(page.variables["term"]).pages(pages)
        return []


class Save(Step):
    """Writes rendered pages to the output directory."""

    name = "Saving pages"

    def init(self, options) -> None:
        super().init(options)
        self.dry_run = options.dry_run

    def can_process(self) -> bool:
        return not self.dry_run

    def process(self) -> None:
        output_path = self.config.output_path
        saved = 0
        for page in self.builder.pages:
            if page.rendered is None:
                continue
            self.fs.write_text(output_path / page.output_file, page.rendered)
            saved += 1
        logger.info(f"[Pages] {saved} file(s) saved to '{output_path}'.")
