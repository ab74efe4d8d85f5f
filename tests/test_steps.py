import io
import logging
import pytest
from pathlib import Path

from PIL import Image

from sitesmith import constants
from sitesmith.builder import Builder
from sitesmith.config import Config
from sitesmith.exceptions import (
    StepError,
    PageNotFoundError,
    ThemeNotFoundError,
    GeneratorNotFoundError,
    LayoutNotFoundError,
)
from sitesmith.datacls import BuildOptions
from sitesmith.steps import optimize
from sitesmith.steps.pages import Render


def build(config_file: Path, options: dict = None) -> Builder:
    return Builder(Config.from_file(config_file)).build(options)


def output(config_file: Path, relative: str) -> Path:
    return config_file.parent / '_site' / relative


class TestSiteBuild:
    """End-to-end builds of a small site with the default pipeline."""

    def test_pages_are_rendered_and_saved(self, make_site):
        config_file = make_site()
        builder = build(config_file)

        home = output(config_file, 'index.html').read_text()
        assert '<p>Welcome</p>' in home
        assert 'href="https://example.com/blog/post/"' in home

        post = output(config_file, 'blog/post/index.html').read_text()
        assert 'Hello</h1>' in post
        assert '<title>Post - Test Site</title>' in post
        assert 'href="https://example.com/"' in post

        assert builder.pages.get('index').type == constants.PAGE_TYPE_HOMEPAGE
        assert builder.renderer is not None

    def test_drafts_are_skipped(self, make_site):
        config_file = make_site()
        builder = build(config_file)
        assert not builder.pages.has('draft')
        assert not output(config_file, 'draft/index.html').exists()

    def test_drafts_option(self, make_site):
        config_file = make_site()
        builder = build(config_file, {'drafts': True})
        assert builder.pages.has('draft')
        assert output(config_file, 'draft/index.html').exists()

    def test_unpublished_pages_are_skipped(self, make_site):
        config_file = make_site(files={'pages/hidden.md': "---\npublished: false\n---\nHidden\n"})
        assert not build(config_file).pages.has('hidden')

    def test_broken_front_matter_is_reported(self, make_site, caplog):
        caplog.set_level(logging.INFO)
        config_file = make_site()
        builder = build(config_file)
        assert not builder.pages.has('broken')
        assert any(
            r.levelno == logging.ERROR and "'broken'" in r.getMessage()
            for r in caplog.records
        )

    def test_dry_run_writes_nothing(self, make_site):
        config_file = make_site()
        builder = build(config_file, {'dry-run': True})
        assert not (config_file.parent / '_site').exists()
        assert builder.pages.get('index').rendered is not None

    def test_single_page(self, make_site):
        config_file = make_site()
        builder = build(config_file, {'page': 'blog/post.md'})
        assert [page.id for page in builder.pages if not page.virtual] == ['blog/post']

        builder = build(config_file, {'page': 'blog/post'})
        assert builder.pages.has('blog/post')

    def test_missing_single_page(self, make_site):
        config_file = make_site()
        with pytest.raises(StepError) as excinfo:
            build(config_file, {'page': 'nope.md'})
        assert excinfo.value.step_name == 'Loading pages'
        assert isinstance(excinfo.value.__cause__, PageNotFoundError)

    def test_data_files(self, make_site):
        config_file = make_site(files={'data/site.json': '{"year": 2024}'})
        builder = build(config_file)
        assert builder.data == {'authors': {'jane': {'name': 'Jane'}}, 'site': {'year': 2024}}

    def test_data_in_templates(self, make_site):
        config_file = make_site(files={
            'layouts/_default/page.html': "{{ site.data.authors.jane.name }} wrote {{ page.title }}",
        })
        build(config_file)
        assert output(config_file, 'blog/post/index.html').read_text() == 'Jane wrote Post'

    def test_static_files_are_copied(self, make_site):
        config_file = make_site(files={'static/.DS_Store': 'junk'})
        builder = build(config_file)
        assert set(builder.static_files) == {'css/style.css'}
        assert output(config_file, 'css/style.css').read_text() == "body {  color : red ; }\n"

    def test_slug_renames_page(self, make_site):
        config_file = make_site(files={'pages/blog/second.md': "---\ntitle: Second\nslug: Other Name\n---\nx\n"})
        builder = build(config_file)
        assert builder.pages.has('blog/other-name')
        assert output(config_file, 'blog/other-name/index.html').exists()

    def test_slug_collision_keeps_both_pages(self, make_site, caplog):
        caplog.set_level(logging.INFO)
        config_file = make_site(files={
            'pages/about.md': "---\ntitle: About\n---\nFirst\n",
            'pages/other.md': "---\ntitle: Other\nslug: about\n---\nSecond\n",
        })
        builder = build(config_file)

        assert builder.pages.get('about').title == 'About'
        assert builder.pages.get('other').title == 'Other'
        assert 'First' in output(config_file, 'about/index.html').read_text()
        assert 'Second' in output(config_file, 'other/index.html').read_text()
        assert any(
            r.levelno == logging.ERROR and "page 'about' already exists" in r.getMessage()
            for r in caplog.records
        )

    def test_first_build_of_a_fresh_builder(self, make_site, caplog):
        """Every step that writes output runs on the very first build."""
        caplog.set_level(logging.DEBUG)
        config_file = make_site()
        builder = Builder(Config.from_file(config_file))
        builder.build()

        assert output(config_file, 'index.html').exists()
        assert output(config_file, 'blog/post/index.html').exists()
        assert output(config_file, 'css/style.css').exists()
        assert builder.renderer is not None

        steps = [r.getMessage() for r in caplog.records if getattr(r, 'step', None)]
        for name in ('Converting pages', 'Rendering pages', 'Saving pages', 'Copying static files'):
            assert name in steps

    def test_empty_site(self, make_site, caplog):
        caplog.set_level(logging.INFO)
        config_file = make_site(config={'generators': []})
        for name in ('index.md', 'blog/post.md', 'draft.md', 'broken.md'):
            (config_file.parent / 'pages' / name).unlink()
        (config_file.parent / 'static' / 'css' / 'style.css').unlink()

        builder = build(config_file)
        assert len(builder.pages) == 0
        assert builder.renderer is None
        assert 'No page to convert' in caplog.text
        assert 'No page to render' in caplog.text
        assert 'No static file to copy' in caplog.text

    def test_section_layout(self, make_site):
        config_file = make_site(files={'layouts/blog/page.html': "BLOG {{ page.title }}"})
        build(config_file)
        assert output(config_file, 'blog/post/index.html').read_text() == 'BLOG Post'
        assert 'Welcome' in output(config_file, 'index.html').read_text()

    def test_missing_front_matter_layout_falls_back(self, make_site):
        config_file = make_site(files={'pages/about.md': "---\nlayout: missing.html\n---\nx\n"})
        builder = build(config_file)
        assert builder.pages.get('about').layout == 'missing.html'
        assert output(config_file, 'about/index.html').exists()

    def test_no_layout_at_all(self, make_site):
        config_file = make_site(
            config={'generators': []},
            files={'pages/odd.md': "---\nlayout: missing.html\n---\nx\n"},
        )
        builder = Builder(Config.from_file(config_file))
        builder.build()
        page = builder.pages.get('odd')
        page.type = 'unknown'
        with pytest.raises(LayoutNotFoundError):
            Render(builder)._layout(page)

    def test_languages(self, make_site):
        config_file = make_site(
            config={'languages': ['en', 'fr']},
            files={
                'pages/index.fr.md': "---\ntitle: Accueil\n---\nBienvenue\n",
                'pages/about.fr.md': "---\ntitle: A propos\nmenu: main\n---\nx\n",
            },
        )
        builder = build(config_file)
        assert builder.pages.get('fr/about').language == 'fr'
        assert builder.pages.get('fr/index').type == constants.PAGE_TYPE_HOMEPAGE
        french_home = output(config_file, 'fr/index.html').read_text()
        assert 'A propos' in french_home
        assert 'Post' not in french_home.split('<main>')[1]
        assert builder.get_menus('fr').get('main').ids() == ['home', 'fr/about']


class TestTaxonomiesAndMenus:
    """Tests for taxonomies, menus and generated pages."""

    def test_taxonomies(self, make_site):
        config_file = make_site()
        builder = build(config_file)

        tags = builder.taxonomies.get('tags')
        assert tags.ids() == ['python', 'static-sites']
        assert tags.get('static-sites').name == 'Static Sites'
        assert [page.id for page in tags.get('python').pages(builder.pages)] == ['blog/post']

        assert 'Post' in output(config_file, 'tags/python/index.html').read_text()
        vocabulary = output(config_file, 'tags/index.html').read_text()
        assert 'href="https://example.com/tags/static-sites/"' in vocabulary

    def test_menus(self, make_site):
        builder = build(make_site())
        main = builder.get_menus('en').get('main')
        assert [entry.id for entry in main.sorted()] == ['home', 'blog/post']
        assert main.get('blog/post').url == '/blog/post/'
        assert main.get('blog/post').page_id == 'blog/post'

    def test_page_menu_options(self, make_site):
        config_file = make_site(files={
            'pages/about.md': "---\ntitle: About\nmenu:\n  main:\n    name: About us\n    weight: -1\n  footer: {}\n---\nx\n",
        })
        menus = build(config_file).get_menus('en')
        assert [entry.name for entry in menus.get('main').sorted()] == ['About us', 'Home', 'Post']
        assert menus.get('footer').ids() == ['about']

    def test_repeated_builds_rebuild_collections(self, make_site):
        config_file = make_site()
        builder = Builder(Config.from_file(config_file))

        builder.build()
        first_pages = builder.pages.ids()
        first_terms = builder.taxonomies.get('tags').ids()
        builder.build()

        assert builder.pages.ids() == first_pages
        assert builder.taxonomies.get('tags').ids() == first_terms
        assert len(builder.get_menus('en').get('main')) == 2

    def test_removed_page_leaves_taxonomy(self, make_site):
        config_file = make_site()
        builder = Builder(Config.from_file(config_file))
        builder.build()
        (config_file.parent / 'pages' / 'blog' / 'post.md').unlink()
        builder.build()
        assert len(builder.taxonomies.get('tags')) == 0
        assert not builder.pages.has('tags/python')

    def test_aliases(self, make_site):
        config_file = make_site()
        builder = build(config_file)
        alias = builder.pages.get('old-post')
        assert alias.virtual
        redirect = output(config_file, 'old-post/index.html').read_text()
        assert 'http-equiv="refresh"' in redirect
        assert 'https://example.com/blog/post/' in redirect

    def test_sitemap(self, make_site):
        config_file = make_site()
        build(config_file)
        sitemap = output(config_file, 'sitemap.xml').read_text()
        assert '<loc>https://example.com/blog/post/</loc>' in sitemap
        assert '<loc>https://example.com/</loc>' in sitemap
        assert 'old-post' not in sitemap
        assert 'sitemap.xml' not in sitemap

    def test_generated_page_does_not_override_content(self, make_site):
        config_file = make_site(files={'pages/tags/python.md': "---\ntitle: Python tag\n---\nMine\n"})
        builder = build(config_file)
        page = builder.pages.get('tags/python')
        assert not page.virtual
        assert 'Mine' in output(config_file, 'tags/python/index.html').read_text()

    def test_no_generators(self, make_site):
        config_file = make_site(config={'generators': []})
        builder = build(config_file)
        assert not builder.pages.has('sitemap')
        assert builder.generators is None

    def test_unknown_generator(self, make_site):
        config_file = make_site(config={'generators': ['nope']})
        with pytest.raises(StepError) as excinfo:
            build(config_file)
        assert excinfo.value.step_name == 'Generating pages'
        assert isinstance(excinfo.value.__cause__, GeneratorNotFoundError)


class TestThemes:
    """Tests for themes."""

    THEME_FILES = {
        'themes/basic/config.yml': "title: Theme title\ntheme_var: from theme\n",
        'themes/basic/layouts/_default/page.html': "THEME {{ page.title }} {{ site.theme_var }}",
        'themes/basic/static/theme.css': "a { color: blue; }\n",
        'themes/basic/static/css/style.css': "overridden by the site\n",
    }

    def test_theme_layouts_and_static(self, make_site):
        config_file = make_site(config={'theme': 'basic'}, files=self.THEME_FILES)
        builder = build(config_file)

        assert builder.context.themes == [config_file.parent / 'themes' / 'basic']
        assert output(config_file, 'blog/post/index.html').read_text() == 'THEME Post from theme'
        assert output(config_file, 'theme.css').exists()
        assert output(config_file, 'css/style.css').read_text() == "body {  color : red ; }\n"
        assert builder.config.model.title == 'Test Site'

    def test_site_layout_wins_over_theme(self, make_site):
        files = dict(self.THEME_FILES)
        files['layouts/_default/page.html'] = "SITE {{ page.title }}"
        config_file = make_site(config={'theme': 'basic'}, files=files)
        build(config_file)
        assert output(config_file, 'blog/post/index.html').read_text() == 'SITE Post'

    def test_missing_theme(self, make_site):
        config_file = make_site(config={'theme': 'nope'})
        with pytest.raises(StepError) as excinfo:
            build(config_file)
        assert excinfo.value.step_name == 'Importing themes'
        assert isinstance(excinfo.value.__cause__, ThemeNotFoundError)


class TestOptimize:
    """Tests for the output optimization steps."""

    def test_disabled_by_default(self, make_site):
        config_file = make_site()
        build(config_file)
        assert '\n' in output(config_file, 'index.html').read_text()

    def test_html_css_js(self, make_site):
        config_file = make_site(
            config={'optimize': {'enabled': True, 'gzip': True}},
            files={
                'static/js/app.js': "var a = 1;   \n\n\nvar b = 2;\n",
                'static/js/big.js': "var list = [\n" + "  'item',\n" * 200 + "];\n",
                'static/big.css': "/* big */\n" + "p  {  margin : 0 ;  }\n" * 200,
                'layouts/_default/page.html': (
                    "<html>\n  <body>\n    <!-- comment -->\n    <pre>  keep\n  this</pre>\n"
                    "    {{ page.title }}\n  </body>\n</html>\n"
                ),
            },
        )
        build(config_file)

        html = output(config_file, 'blog/post/index.html').read_text()
        assert '<!-- comment -->' not in html
        assert '<pre>  keep\n  this</pre>' in html
        assert '<body>' in html

        assert output(config_file, 'css/style.css').read_text() == 'body{color : red}'
        assert output(config_file, 'js/app.js').read_text() == "var a = 1;   \n\n\nvar b = 2;\n"
        assert output(config_file, 'big.css.gz').exists()
        assert output(config_file, 'js/big.js.gz').exists()
        assert not output(config_file, 'js/app.js.gz').exists()

    def test_css_strings_are_kept(self, make_site):
        step = optimize.Css(Builder(Config.from_file(make_site())))
        source = b'a::after { content: "/* x */"; }\n/* drop me */\nb { content: \'a  ;  b\'; }\n'
        assert step.optimize(source, Path('style.css')) == (
            b'a::after{content: "/* x */"}b{content: \'a  ;  b\'}'
        )

    def test_css_license_comment_is_kept(self, make_site):
        step = optimize.Css(Builder(Config.from_file(make_site())))
        result = step.optimize(b'/*! MIT */\na { color: red; }\n', Path('style.css'))
        assert result.startswith(b'/*! MIT */')

    def test_js_is_left_untouched(self, make_site):
        """Template literals keep their whitespace."""
        script = "const s = `a\n\nb   \n`;\n"
        config_file = make_site(
            config={'optimize': {'enabled': True}},
            files={'static/js/template.js': script},
        )
        step = optimize.Js(Builder(Config.from_file(config_file)))
        assert step.optimize(script.encode('utf-8'), Path('template.js')) is None

        build(config_file)
        assert output(config_file, 'js/template.js').read_text() == script

    def test_enabled_on_a_fresh_builder(self, make_site):
        config_file = make_site(config={'optimize': {'enabled': True}})
        builder = Builder(Config.from_file(config_file))
        step = optimize.Css(builder)
        step.init(BuildOptions.resolve())
        assert step.can_process() is True

        builder.build()
        assert output(config_file, 'css/style.css').read_text() == 'body{color : red}'

    def test_missing_output_directory(self, make_site, caplog):
        caplog.set_level(logging.INFO)
        config_file = make_site(config={'optimize': {'enabled': True}})
        step = optimize.Html(Builder(Config.from_file(config_file)))
        step.init(BuildOptions.resolve())
        step.process()
        assert not (config_file.parent / '_site').exists()
        assert 'Nothing to optimize' in caplog.text

    def test_type_switch(self, make_site):
        config_file = make_site(config={'optimize': {'enabled': True, 'css': {'enabled': False}}})
        build(config_file)
        assert output(config_file, 'css/style.css').read_text() == "body {  color : red ; }\n"

    def test_dry_run_skips_optimize(self, make_site):
        config_file = make_site(config={'optimize': {'enabled': True}})
        builder = Builder(Config.from_file(config_file))
        step = optimize.Html(builder)
        step.init(BuildOptions.resolve({'dry-run': True}))
        assert step.can_process() is False

    def test_images(self, make_site, caplog):
        buffer = io.BytesIO()
        Image.new('RGB', (64, 64), 'white').save(buffer, format='PNG', compress_level=0)
        data = buffer.getvalue()
        step = optimize.Images(Builder(Config.from_file(make_site())))

        result = step.optimize(data, Path('white.png'))
        assert result is not None
        assert len(result) < len(data)

        assert step.optimize(b'not an image', Path('bad.png')) is None
        assert "Image optimization of 'bad.png' failed" in caplog.text
